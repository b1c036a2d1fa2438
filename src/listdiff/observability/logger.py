"""Structured JSON logging for listdiff.

Each record is written as one JSON object per line.  Diff-specific data
(strategy name, collection lengths, edit counts) travels in the
``extra_fields`` mapping and is merged into the top level of the object::

    {"ts": "2026-10-18T09:12:44.031207+00:00", "level": "DEBUG",
     "logger": "listdiff.diff", "message": "diff complete",
     "strategy": "index_set", "old_length": 40, "new_length": 41, "edits": 1}

Usage::

    from listdiff.observability import get_logger

    log = get_logger("listdiff.diff")
    log.debug("diff complete", extra={"extra_fields": {"edits": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "listdiff"


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Values that are not JSON serialisable (collection
    elements, enums) fall back to ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


# Names that already carry a StructuredFormatter handler, so repeated
# ``get_logger`` calls never stack handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = ROOT_LOGGER,
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Return a logger that writes structured JSON.

    Only the package root (``"listdiff"``) receives a handler; child loggers
    such as ``"listdiff.reducer"`` propagate to it.  This keeps the diff hot
    path free of handler lookups when the caller never configures logging.

    Parameters
    ----------
    name:
        Logger name.  Names outside the ``listdiff`` namespace get their own
        handler.
    level:
        Level for a newly configured handler-bearing logger.  Accepts an
        ``int`` or a case-insensitive level name.  Ignored for child loggers
        and for loggers that were already configured.
    stream:
        Output stream for a newly attached handler.  Defaults to
        ``sys.stderr``.
    """
    logger = logging.getLogger(name)
    is_child = name.startswith(ROOT_LOGGER + ".")
    if is_child:
        get_logger(ROOT_LOGGER)
        return logger

    if name not in _configured_loggers:
        resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        logger.setLevel(resolved)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
