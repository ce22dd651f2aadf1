"""Tests for portfolio/client/state.py — form lifecycle transitions."""

from __future__ import annotations

import pytest

from portfolio.client import state as fsm
from portfolio.client.state import FormPhase, FormState, InvalidTransition


def _submitting() -> FormState:
    return fsm.begin_submission(fsm.begin_validation(FormState()))


def test_initial_state_is_idle_and_enabled():
    state = FormState()
    assert state.phase is FormPhase.IDLE
    assert state.submit_enabled is True
    assert state.busy_label is None


def test_validation_failure_returns_to_idle_with_field_errors():
    state = fsm.begin_validation(FormState())
    state = fsm.validation_failed(state, {"email": "Email address is required."})
    assert state.phase is FormPhase.IDLE
    assert state.field_errors == {"email": "Email address is required."}
    assert state.submit_enabled is True


def test_submission_disables_control_and_shows_busy_label():
    state = _submitting()
    assert state.phase is FormPhase.SUBMITTING
    assert state.submit_enabled is False
    assert state.busy_label == "Sending..."


def test_success_shows_confirmation_for_eight_seconds():
    state = fsm.submission_succeeded(_submitting(), "Thanks!")
    assert state.phase is FormPhase.SUCCESS
    assert state.confirmation == "Thanks!"
    assert state.display_seconds == 8.0


def test_error_banner_lasts_five_seconds_with_fallback_message():
    state = fsm.submission_failed(_submitting())
    assert state.phase is FormPhase.ERROR
    assert state.banner == "Failed to send message. Please try again."
    assert state.display_seconds == 5.0


def test_network_failure_has_its_own_message():
    state = fsm.network_failed(_submitting())
    assert state.banner == fsm.NETWORK_ERROR_MESSAGE


def test_release_submit_reenables_control_in_any_phase():
    for state in (
        fsm.submission_succeeded(_submitting()),
        fsm.network_failed(_submitting()),
    ):
        released = fsm.release_submit(state)
        assert released.submit_enabled is True
        assert released.busy is False
        assert released.phase is state.phase


def test_release_submit_without_outcome_returns_to_idle():
    released = fsm.release_submit(_submitting())
    assert released.phase is FormPhase.IDLE
    assert released.submit_enabled is True
    assert fsm.begin_validation(released).phase is FormPhase.VALIDATING


def test_reset_after_success_restores_empty_form():
    state = fsm.reset(fsm.submission_succeeded(_submitting()))
    assert state == FormState()


def test_dismiss_banner_returns_to_idle():
    state = fsm.dismiss_banner(fsm.submission_failed(_submitting(), "nope"))
    assert state.phase is FormPhase.IDLE
    assert state.banner is None


def test_resubmitting_while_error_banner_is_visible_is_allowed():
    state = fsm.begin_validation(fsm.submission_failed(_submitting(), "nope"))
    assert state.phase is FormPhase.VALIDATING
    assert state.banner is None


@pytest.mark.parametrize(
    ("transition", "state"),
    [
        (fsm.begin_validation, _submitting()),
        (fsm.begin_submission, FormState()),
        (fsm.submission_succeeded, FormState()),
        (fsm.reset, FormState()),
        (fsm.dismiss_banner, _submitting()),
    ],
)
def test_illegal_transitions_raise(transition, state):
    with pytest.raises(InvalidTransition):
        transition(state)


def test_transitions_do_not_mutate_input():
    state = fsm.begin_validation(FormState())
    fsm.begin_submission(state)
    assert state.phase is FormPhase.VALIDATING
