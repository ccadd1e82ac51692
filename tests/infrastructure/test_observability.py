"""Structured Logging — JSON formatter output."""

import json
import logging

from playground.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "playground.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "playground.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(session_id="abc", revision=3, error_code="PARSE_FAULT"),
    ))
    assert log["session_id"] == "abc"
    assert log["revision"] == 3
    assert log["error_code"] == "PARSE_FAULT"


def test_json_formatter_omits_absent_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "session_id" not in log
    assert "entrypoint" not in log


def test_json_formatter_surfaces_error_classification():
    log = json.loads(JSONFormatter().format(
        _record(error_category="capability", severity="critical", entrypoint="m:f"),
    ))
    assert log["error_category"] == "capability"
    assert log["severity"] == "critical"
    assert log["entrypoint"] == "m:f"


def test_json_formatter_ignores_unknown_extras():
    log = json.loads(JSONFormatter().format(_record(path="/api/v1/sessions")))
    assert "path" not in log
