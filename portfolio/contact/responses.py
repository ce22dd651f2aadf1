"""Map submission outcomes to HTTP status codes and JSON bodies."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import status
from fastapi.responses import JSONResponse

from portfolio.schemas.contact import ContactResponse

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed. Only POST requests are accepted."
SPAM_MESSAGE = "Spam detected."
GENERIC_ERROR_MESSAGE = (
    "An error occurred while processing your request. Please try again later."
)
SUCCESS_MESSAGE = "Thank you for your message! I will get back to you soon."


@dataclass(frozen=True)
class MethodNotAllowed:
    method: str


@dataclass(frozen=True)
class ValidationFailed:
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SpamDetected:
    pass


@dataclass(frozen=True)
class PersistenceFailed:
    detail: str


@dataclass(frozen=True)
class Persisted:
    id: int


Outcome = (
    MethodNotAllowed | ValidationFailed | SpamDetected | PersistenceFailed | Persisted
)


def build_response(
    outcome: Outcome, debug: bool = False
) -> tuple[int, ContactResponse]:
    """Return the status code and body for a submission outcome.

    Persistence diagnostics are only included when ``debug`` is set.
    """
    if isinstance(outcome, MethodNotAllowed):
        return status.HTTP_405_METHOD_NOT_ALLOWED, ContactResponse(
            success=False, message=METHOD_NOT_ALLOWED_MESSAGE
        )
    if isinstance(outcome, ValidationFailed):
        return status.HTTP_400_BAD_REQUEST, ContactResponse(
            success=False,
            message="Validation failed: " + " ".join(outcome.errors),
            errors=list(outcome.errors),
        )
    if isinstance(outcome, SpamDetected):
        return status.HTTP_400_BAD_REQUEST, ContactResponse(
            success=False, message=SPAM_MESSAGE
        )
    if isinstance(outcome, PersistenceFailed):
        message = (
            f"Database error: {outcome.detail}" if debug else GENERIC_ERROR_MESSAGE
        )
        return status.HTTP_500_INTERNAL_SERVER_ERROR, ContactResponse(
            success=False, message=message
        )
    if isinstance(outcome, Persisted):
        return status.HTTP_200_OK, ContactResponse(
            success=True, message=SUCCESS_MESSAGE, id=outcome.id
        )
    raise TypeError(f"Unknown submission outcome: {outcome!r}")


def to_json_response(outcome: Outcome, debug: bool = False) -> JSONResponse:
    status_code, body = build_response(outcome, debug=debug)
    headers = {"Allow": "POST"} if isinstance(outcome, MethodNotAllowed) else None
    return JSONResponse(
        body.model_dump(exclude_none=True),
        status_code=status_code,
        headers=headers,
    )
