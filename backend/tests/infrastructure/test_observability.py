"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging
import sys

from minisite.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "minisite.test", logging.ERROR, __file__, 1, "boom %s", ("x",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "minisite.test"
    assert log["message"] == "boom x"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(path="/boom", error_code="internal_error", secret="nope"),
    ))
    assert log["path"] == "/boom"
    assert log["error_code"] == "internal_error"
    assert "secret" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in log["exception"]


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "minisite"]
    assert len(ours) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.INFO
    logging.root.removeHandler(ours[0])


def test_traceback_kept_out_of_message():
    try:
        raise RuntimeError("kaput")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert log["message"] == "boom x"
    assert "Traceback" not in log["message"]
    assert "Traceback" in log["exception"]
