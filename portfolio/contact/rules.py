"""Validation rules for the contact form.

This module is the single rule set shared by the server endpoint and the
submission client, and is served as JSON so the browser can mirror it.
Everything here is pure: no I/O, no settings, no logging.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

REASONS: tuple[str, ...] = ("job", "project", "feedback", "other")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class FieldRule:
    """Checks for one form field, evaluated required → format → length.

    The first failing check produces the field's violation message.
    """

    field: str
    required_message: str
    min_length: int | None = None
    max_length: int | None = None
    too_short_message: str = ""
    too_long_message: str = ""
    pattern: re.Pattern[str] | None = None
    pattern_message: str = ""
    choices: tuple[str, ...] | None = None
    choices_message: str = ""

    def check(self, value: str) -> str | None:
        if not value:
            return self.required_message
        if self.pattern is not None and not self.pattern.fullmatch(value):
            return self.pattern_message
        if self.choices is not None and value not in self.choices:
            return self.choices_message
        if self.min_length is not None and len(value) < self.min_length:
            return self.too_short_message
        if self.max_length is not None and len(value) > self.max_length:
            return self.too_long_message
        return None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "field": self.field,
            "required_message": self.required_message,
        }
        if self.min_length is not None:
            data["min_length"] = self.min_length
            data["too_short_message"] = self.too_short_message
        if self.max_length is not None:
            data["max_length"] = self.max_length
            data["too_long_message"] = self.too_long_message
        if self.pattern is not None:
            data["pattern"] = self.pattern.pattern
            data["pattern_message"] = self.pattern_message
        if self.choices is not None:
            data["choices"] = list(self.choices)
            data["choices_message"] = self.choices_message
        return data


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        field="fullname",
        required_message="Full name is required.",
        min_length=2,
        max_length=100,
        too_short_message="Full name must be at least 2 characters long.",
        too_long_message="Full name must not exceed 100 characters.",
    ),
    FieldRule(
        field="email",
        required_message="Email address is required.",
        pattern=EMAIL_PATTERN,
        pattern_message="Please provide a valid email address.",
        max_length=255,
        too_long_message="Email address is too long.",
    ),
    FieldRule(
        field="subject",
        required_message="Subject is required.",
        min_length=3,
        max_length=255,
        too_short_message="Subject must be at least 3 characters long.",
        too_long_message="Subject must not exceed 255 characters.",
    ),
    FieldRule(
        field="reason",
        required_message="Please select a reason for contact.",
        choices=REASONS,
        choices_message="Invalid reason selected.",
    ),
    FieldRule(
        field="message",
        required_message="Message is required.",
        min_length=10,
        max_length=5000,
        too_short_message="Message must be at least 10 characters long.",
        too_long_message="Message must not exceed 5000 characters.",
    ),
)

FIELD_NAMES: tuple[str, ...] = tuple(rule.field for rule in FIELD_RULES)


def validate_by_field(fields: Mapping[str, str]) -> dict[str, str]:
    """Return ``{field: message}`` for every field that fails its rule.

    Fields are checked independently so all violations are reported together.
    Missing keys are treated as empty.
    """
    violations: dict[str, str] = {}
    for rule in FIELD_RULES:
        message = rule.check(fields.get(rule.field) or "")
        if message:
            violations[rule.field] = message
    return violations


def validate_fields(fields: Mapping[str, str]) -> list[str]:
    """Return violation messages in form order; an empty list means valid."""
    return list(validate_by_field(fields).values())


def rules_as_dict() -> dict[str, Any]:
    """Serializable form of the rule set for client-side mirroring."""
    return {
        "fields": [rule.as_dict() for rule in FIELD_RULES],
        "reasons": list(REASONS),
    }
