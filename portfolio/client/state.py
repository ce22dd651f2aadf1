"""Contact form states and their pure transition functions.

idle → validating → submitting → (success | error) → idle

Every transition returns a new :class:`FormState`; nothing here touches the
network or the view.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

SUCCESS_DISPLAY_SECONDS = 8.0
ERROR_BANNER_SECONDS = 5.0
BUSY_LABEL = "Sending..."

SUCCESS_FALLBACK_MESSAGE = "Thank you for your message! I will get back to you soon."
FAILED_MESSAGE = "Failed to send message. Please try again."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."


class FormPhase(str, Enum):
    """Where a form instance is in its submission lifecycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(Exception):
    """Raised when an action is not allowed from the current phase."""

    def __init__(self, action: str, phase: FormPhase) -> None:
        super().__init__(f"cannot {action} while {phase.value}")
        self.action = action
        self.phase = phase


@dataclass(frozen=True)
class FormState:
    phase: FormPhase = FormPhase.IDLE
    field_errors: Mapping[str, str] = field(default_factory=dict)
    banner: str | None = None
    confirmation: str | None = None
    submit_enabled: bool = True
    busy: bool = False
    display_seconds: float | None = None

    @property
    def busy_label(self) -> str | None:
        return BUSY_LABEL if self.busy else None


def _require(state: FormState, action: str, *phases: FormPhase) -> None:
    if state.phase not in phases:
        raise InvalidTransition(action, state.phase)


def begin_validation(state: FormState) -> FormState:
    # A still-visible error banner does not block a new attempt.
    _require(state, "validate", FormPhase.IDLE, FormPhase.ERROR)
    return FormState(phase=FormPhase.VALIDATING)


def validation_failed(state: FormState, field_errors: Mapping[str, str]) -> FormState:
    _require(state, "reject fields", FormPhase.VALIDATING)
    return replace(state, phase=FormPhase.IDLE, field_errors=dict(field_errors))


def begin_submission(state: FormState) -> FormState:
    _require(state, "submit", FormPhase.VALIDATING)
    return replace(state, phase=FormPhase.SUBMITTING, submit_enabled=False, busy=True)


def submission_succeeded(state: FormState, message: str | None = None) -> FormState:
    _require(state, "succeed", FormPhase.SUBMITTING)
    return replace(
        state,
        phase=FormPhase.SUCCESS,
        confirmation=message or SUCCESS_FALLBACK_MESSAGE,
        display_seconds=SUCCESS_DISPLAY_SECONDS,
    )


def submission_failed(state: FormState, message: str | None = None) -> FormState:
    _require(state, "fail", FormPhase.SUBMITTING)
    return replace(
        state,
        phase=FormPhase.ERROR,
        banner=message or FAILED_MESSAGE,
        display_seconds=ERROR_BANNER_SECONDS,
    )


def network_failed(state: FormState) -> FormState:
    return submission_failed(state, NETWORK_ERROR_MESSAGE)


def release_submit(state: FormState) -> FormState:
    """Re-enable the submit control; runs after every request, whatever the outcome.

    A request that ended without a recorded outcome leaves the form idle.
    """
    phase = FormPhase.IDLE if state.phase is FormPhase.SUBMITTING else state.phase
    return replace(state, phase=phase, submit_enabled=True, busy=False)


def reset(state: FormState) -> FormState:
    """Confirmation timed out: show an empty form again."""
    _require(state, "reset", FormPhase.SUCCESS)
    return FormState()


def dismiss_banner(state: FormState) -> FormState:
    _require(state, "dismiss banner", FormPhase.ERROR)
    return replace(state, phase=FormPhase.IDLE, banner=None, display_seconds=None)
