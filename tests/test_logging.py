"""Tests for portfolio/observability/logging.py."""

from __future__ import annotations

import json
import logging

from pythonjsonlogger import jsonlogger

from portfolio.observability.logging import RequestIdFilter, configure_logging


def _handler() -> logging.Handler:
    return next(
        handler
        for handler in logging.getLogger().handlers
        if any(isinstance(f, RequestIdFilter) for f in handler.filters)
    )


def _record(msg: str = "stored") -> logging.LogRecord:
    return logging.LogRecord("portfolio.test", logging.INFO, __file__, 1, msg, None, None)


def test_filter_marks_records_outside_requests():
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_json_formatter_includes_request_id():
    configure_logging("INFO", json_format=True)
    handler = _handler()
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)

    record = _record("Stored contact message id=3")
    handler.filter(record)
    payload = json.loads(handler.format(record))
    assert payload["message"] == "Stored contact message id=3"
    assert payload["request_id"] == "-"
    assert payload["levelname"] == "INFO"


def test_plain_format_for_development():
    configure_logging("DEBUG", json_format=False)
    handler = _handler()
    assert not isinstance(handler.formatter, jsonlogger.JsonFormatter)
    assert logging.getLogger("portfolio").level == logging.DEBUG
