"""Structured Logging — one JSON object per pipeline log record.

Invariants:
    - Every record carries timestamp, level, logger name, and message
    - Failure fields (category, severity, path, route, violation_count) are
      copied from the record's extras only when set; request bodies never are
    - LOG_FORMAT=json emits JSON lines, anything else a plain text line

Design Decisions:
    - The level of a failure record comes from its outcome's ErrorSeverity, so
      a level filter drops client noise while keeping INTERNAL tracebacks
    - Configured once by the app lifespan (main.py) from Settings
"""

import json
import logging
from datetime import datetime, timezone


EXTRA_FIELDS: tuple[str, ...] = (
    "category", "severity", "path", "route", "violation_count",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, failure extras included."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
