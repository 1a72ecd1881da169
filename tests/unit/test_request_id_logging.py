"""Tests for request id sanitizing and the logging filter."""

import logging
import uuid

import pytest

from app.middleware.request_id import sanitize_request_id
from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.telemetry.logging import RequestIDLogFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_uses_dash_outside_request() -> None:
    record = _record()
    assert RequestIDLogFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_uses_current_request_id() -> None:
    token = set_request_id("req-123")
    try:
        record = _record()
        RequestIDLogFilter().filter(record)
        assert record.request_id == "req-123"
    finally:
        reset_request_id(token)
    assert get_request_id() == "-"


def test_sanitize_keeps_valid_id() -> None:
    assert sanitize_request_id("abc_DEF-123") == "abc_DEF-123"


@pytest.mark.parametrize("raw", [None, "", "bad id!", "x" * 65, "a\nb"])
def test_sanitize_replaces_invalid_id(raw: str | None) -> None:
    result = sanitize_request_id(raw)
    assert result != raw
    uuid.UUID(result)
