"""Normalize raw form values before validation and storage."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import escape

from portfolio.contact.rules import FIELD_NAMES


def sanitize_input(value: Any) -> str:
    """Strip surrounding whitespace and HTML-escape a raw field value.

    ``None`` becomes an empty string; never raises.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return str(escape(value.strip()))


def sanitize_form(form: Mapping[str, Any]) -> dict[str, str]:
    """Sanitize the contact fields of a submitted form; absent keys become ``""``."""
    return {name: sanitize_input(form.get(name)) for name in FIELD_NAMES}
