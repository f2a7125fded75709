"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (request_id, status, record_count, ...) surfaced when present
    - JSON format in production, human-readable text in development
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control (ADR: simplicity)
    - setup_logging called once on startup via lifespan
    - Logs go to stdout so container runtimes collect them without extra config
"""

import logging
import json
import sys
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "request_id", "method", "path", "query", "status", "latency_ms",
    "client_ip", "record_count", "file", "error_code", "guid",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
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


class TextFormatter(logging.Formatter):
    """Human-readable line with extra fields appended as key=value."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = [
            f"{key}={record.__dict__[key]}"
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        ]
        return f"{line} {' '.join(pairs)}" if pairs else line


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger for the application."""
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(_handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
