"""
Tests for logging helpers and the request logging middleware.
"""

import json
import logging

from chat_relay.core.logging_config import (
    JSONFormatter,
    LoggerAdapter,
    filter_sensitive_data,
    truncate_large_data,
)
from chat_relay.middleware.logging_middleware import _extract_error_reason, _sanitize_body


class TestFilterSensitiveData:

    def test_masks_nested_keys(self):
        data = {"api_key": "sk-1", "nested": [{"Authorization": "Bearer x", "city": "Seattle"}]}
        filtered = filter_sensitive_data(data)
        assert filtered["api_key"] == "***FILTERED***"
        assert filtered["nested"][0]["Authorization"] == "***FILTERED***"
        assert filtered["nested"][0]["city"] == "Seattle"

    def test_primitives_untouched(self):
        assert filter_sensitive_data("plain") == "plain"


def test_truncate_large_data():
    assert truncate_large_data("abc", max_length=5) == "abc"
    assert truncate_large_data("abcdef", max_length=3).startswith("abc... (truncated")


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("relay", logging.INFO, __file__, 1, "Turn answered", None, None)
    record.extra_fields = {"session_id": 4}
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "Turn answered"
    assert payload["session_id"] == 4
    assert payload["level"] == "INFO"


def test_logger_adapter_merges_context():
    adapter = LoggerAdapter(logging.getLogger("relay"), {"session_id": 4})
    _, kwargs = adapter.process("msg", {"extra": {"extra_fields": {"turn": 2}}})
    assert kwargs["extra"]["extra_fields"] == {"session_id": 4, "turn": 2}


class TestMiddlewareHelpers:

    def test_sanitize_body_masks_json(self):
        text = _sanitize_body([b'{"userMessage": "hi", ', b'"token": "abc"}'])
        assert json.loads(text) == {"userMessage": "hi", "token": "***FILTERED***"}

    def test_sanitize_body_empty(self):
        assert _sanitize_body([b""]) is None

    def test_error_reason_prefers_error_key(self):
        assert _extract_error_reason('{"error": "Invalid request data"}') == "Invalid request data"

    def test_error_reason_plain_text(self):
        assert _extract_error_reason("boom") == "boom"
