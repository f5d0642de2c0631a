"""Structured logging utilities with JSON output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

# Promoted to top-level keys; every other `extra` lands under "context".
DEFAULT_FIELDS = ("run_id", "component", "shape_kind", "n_samples", "duration_ms")

_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record: standard fields, context fields, then any other extras."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context: Dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in DEFAULT_FIELDS:
                payload[key] = value
            elif key not in _RESERVED and not key.startswith("_"):
                context[key] = value
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _ContextFilter(logging.Filter):
    """Fill run_id/component on records that did not pass them explicitly."""

    def __init__(self, run_id: Optional[str], component: Optional[str]) -> None:
        super().__init__()
        self.run_id = run_id
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if self.run_id and not hasattr(record, "run_id"):
            record.run_id = self.run_id
        if self.component and not hasattr(record, "component"):
            record.component = self.component
        return True


def configure_logging(
    run_id: Optional[str] = None,
    component: Optional[str] = None,
    level: int | str = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """Route the root logger through a single JSON handler.

    Output goes to stderr unless `stream` is given, which keeps stdout free for
    the CLI's Rich tables. `level` accepts an int or a name such as "DEBUG".
    """

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(_ContextFilter(run_id, component))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None, component: Optional[str] = None) -> logging.Logger:
    """Fetch a logger; `component`/`run_id` become defaults on every record it emits."""

    logger = logging.getLogger(name)
    if (run_id or component) and not any(
        isinstance(f, _ContextFilter) and (f.run_id, f.component) == (run_id, component) for f in logger.filters
    ):
        logger.addFilter(_ContextFilter(run_id, component))
    return logger


__all__ = ["DEFAULT_FIELDS", "JSONFormatter", "configure_logging", "get_logger"]
