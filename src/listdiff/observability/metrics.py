"""Metrics hook protocol and no-op default implementation.

The diff entry point reports how often each strategy runs, how long it
takes, and how many edits of each kind it produced.  Without a configured
backend a :class:`NoopMetricsHook` swallows everything.  Any object with
matching ``increment``/``timing``/``gauge`` methods can be plugged in via
:attr:`listdiff.config.DiffConfig.metrics`.

Emitted metric names:

* ``listdiff.diffs_total``       -- counter, tag ``strategy``
* ``listdiff.diff_duration_ms``  -- timing, tag ``strategy``
* ``listdiff.edits_total``       -- counter, tag ``operation``
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics implementation that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
