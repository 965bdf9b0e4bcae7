"""Observability — verifies the JSON log line and idempotent setup."""

import json
import logging

from commerce_api.infrastructure.observability import (
    JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "commerce_api.test", logging.INFO, __file__, 1, "order %s", ("ok",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_has_core_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "INFO"
    assert line["service"] == "commerce-api"
    assert line["logger"] == "commerce_api.test"
    assert line["msg"] == "order ok"
    assert "ts" in line


def test_json_line_surfaces_known_extras_only():
    line = json.loads(JSONFormatter().format(
        _record(order_id="o-1", status_code=200, secret="x"),
    ))
    assert line["order_id"] == "o-1"
    assert line["status_code"] == 200
    assert "secret" not in line


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("DEBUG", "text")
        handler = setup_logging("WARNING", "json")
        ours = [h for h in root.handlers if h.get_name() == "commerce_api"]
        assert ours == [handler]
        assert isinstance(handler.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
