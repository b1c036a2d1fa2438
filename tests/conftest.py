"""Shared test fixtures for the listdiff test suite."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from listdiff.config import DiffConfig
from listdiff.strategies import IndexSetDiff, WagnerFischerDiff


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})


@pytest.fixture
def config() -> DiffConfig:
    """Default configuration."""
    return DiffConfig()


@pytest.fixture
def recording_metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def index_set() -> IndexSetDiff:
    """Strategy A with move reduction."""
    return IndexSetDiff()


@pytest.fixture
def wagner_fischer() -> WagnerFischerDiff:
    """Strategy B without move reduction."""
    return WagnerFischerDiff()


@pytest.fixture
def log_records():
    """Collect every record logged under ``listdiff``, DEBUG and up."""
    records: list[logging.LogRecord] = []

    class _Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    logger = logging.getLogger("listdiff")
    previous_level = logger.level
    handler = _Collect()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
