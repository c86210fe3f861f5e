"""StructuredFormatter JSON output."""
import json
import logging

import pytest

from app.utils.logging import StructuredFormatter, current_request_id


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.WARNING, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestStructuredFormatter:
    def test_basic_fields(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["level"] == "WARNING"
        assert data["msg"] == "hello"
        assert data["logger"] == "app.test"
        assert data["request_id"] == "-"

    def test_request_id_from_context(self):
        token = current_request_id.set("req-42")
        try:
            data = json.loads(StructuredFormatter().format(_record()))
        finally:
            current_request_id.reset(token)
        assert data["request_id"] == "req-42"

    def test_request_fields_included(self):
        record = _record(method="POST", path="/toggle", status_code=302, duration_ms=1.5)
        data = json.loads(StructuredFormatter().format(record))
        assert data["method"] == "POST"
        assert data["path"] == "/toggle"
        assert data["status_code"] == 302
        assert data["duration_ms"] == 1.5

    def test_non_ascii_kept(self):
        data = json.loads(StructuredFormatter().format(_record("북마크")))
        assert data["msg"] == "북마크"
