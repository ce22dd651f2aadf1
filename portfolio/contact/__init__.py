"""Contact form pipeline: sanitize, validate, spam guard, respond."""

from portfolio.contact.responses import (  # noqa: F401
    MethodNotAllowed,
    Persisted,
    PersistenceFailed,
    SpamDetected,
    ValidationFailed,
    build_response,
    to_json_response,
)
from portfolio.contact.rules import (  # noqa: F401
    FIELD_NAMES,
    REASONS,
    validate_by_field,
    validate_fields,
)
from portfolio.contact.sanitize import sanitize_form, sanitize_input  # noqa: F401
from portfolio.contact.spam import HONEYPOT_FIELD, is_spam  # noqa: F401

__all__ = [
    "FIELD_NAMES",
    "HONEYPOT_FIELD",
    "REASONS",
    "MethodNotAllowed",
    "Persisted",
    "PersistenceFailed",
    "SpamDetected",
    "ValidationFailed",
    "build_response",
    "is_spam",
    "sanitize_form",
    "sanitize_input",
    "to_json_response",
    "validate_by_field",
    "validate_fields",
]
