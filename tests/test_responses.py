"""Tests for portfolio/contact/responses.py — outcome to HTTP mapping."""

from __future__ import annotations

import json

import pytest

from portfolio.contact.responses import (
    GENERIC_ERROR_MESSAGE,
    MethodNotAllowed,
    Persisted,
    PersistenceFailed,
    SpamDetected,
    ValidationFailed,
    build_response,
    to_json_response,
)


def _body(response) -> dict:
    return json.loads(response.body)


def test_method_not_allowed():
    response = to_json_response(MethodNotAllowed("GET"))
    assert response.status_code == 405
    assert response.headers["allow"] == "POST"
    assert _body(response) == {
        "success": False,
        "message": "Method not allowed. Only POST requests are accepted.",
    }


def test_validation_failure_joins_messages():
    errors = ["Subject is required.", "Message is required."]
    status_code, body = build_response(ValidationFailed(errors))
    assert status_code == 400
    assert body.success is False
    assert body.message == "Validation failed: Subject is required. Message is required."
    assert body.errors == errors


def test_spam():
    response = to_json_response(SpamDetected())
    assert response.status_code == 400
    assert _body(response) == {"success": False, "message": "Spam detected."}


@pytest.mark.parametrize(
    ("debug", "expected"),
    [
        (True, "Database error: disk I/O error"),
        (False, GENERIC_ERROR_MESSAGE),
    ],
)
def test_persistence_failure_hides_detail_unless_debug(debug, expected):
    status_code, body = build_response(
        PersistenceFailed("disk I/O error"), debug=debug
    )
    assert status_code == 500
    assert body.success is False
    assert body.message == expected


def test_success_includes_id_and_omits_errors():
    response = to_json_response(Persisted(7))
    assert response.status_code == 200
    assert _body(response) == {
        "success": True,
        "message": "Thank you for your message! I will get back to you soon.",
        "id": 7,
    }


def test_unknown_outcome_is_rejected():
    with pytest.raises(TypeError):
        build_response(object())
