"""Structured Logging: JSON shape and extra fields."""

import json
import logging
import sys

from resume_store.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "resume_store.test", logging.WARNING, __file__, 1,
        "skill %s failed", ("create",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "resume_store.test"
    assert payload["message"] == "skill create failed"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(entity="skill", operation="create", error_code="NOT_FOUND", user="x"),
    ))
    assert payload["entity"] == "skill"
    assert payload["operation"] == "create"
    assert payload["error_code"] == "NOT_FOUND"
    assert "user" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in payload["exception"]


def test_setup_logging_installs_handler():
    handler = setup_logging("debug", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
