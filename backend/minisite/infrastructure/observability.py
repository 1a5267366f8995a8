"""Structured Logging — one JSON object per line for the site's request and failure logs.

Invariants:
    - Every line carries timestamp (UTC), level, logger name, and message
    - Only whitelisted request fields (EXTRA_FIELDS) are copied from `extra=`;
      nothing else on the record (cookies, form data) can leak into a line
    - Tracebacks appear only under "exception", never inline in "message"
    - setup_logging() is idempotent: repeated calls never stack handlers

Design Decisions:
    - stdlib logging.Formatter subclass: uvicorn runs with log_config=None, so
      this handler is the only one on the root logger
    - Handler tagged by name so re-running the lifespan (tests, reloads) replaces it
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "path", "method", "status_code", "error_code", "error_type", "request_id",
)

_HANDLER_NAME = "minisite"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
