"""JSON log formatter — required keys and extra fields."""

import json
import logging
import sys

from shelf_api.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "shelf_api.services.record_store", logging.INFO, __file__, 1,
        "User 1 created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "shelf_api.services.record_store"
    assert log["message"] == "User 1 created"
    assert "timestamp" in log


def test_surfaces_known_extra_fields_only():
    log = json.loads(JSONFormatter().format(
        _record(resource="User", resource_id=1, unrelated="x"),
    ))
    assert log["resource"] == "User"
    assert log["resource_id"] == 1
    assert "unrelated" not in log


def test_includes_exception_text():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]
