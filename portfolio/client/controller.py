"""Submit the contact form over HTTP and drive a view from the result."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from portfolio.client import state as fsm
from portfolio.client.state import FormPhase, FormState
from portfolio.contact.rules import validate_by_field
from portfolio.contact.sanitize import sanitize_form

logger = logging.getLogger(__name__)


class View(Protocol):
    """Rendering side of the form; timers for the display durations live here."""

    def clear_annotations(self) -> None: ...

    def annotate(self, field_errors: Mapping[str, str]) -> None: ...

    def set_busy(self, busy: bool, label: str | None) -> None: ...

    def show_success(self, message: str, seconds: float) -> None: ...

    def show_error(self, message: str, seconds: float) -> None: ...

    def reset_form(self) -> None: ...

    def hide_error(self) -> None: ...


class SubmissionController:
    """One form instance: validates locally, posts, and renders the outcome.

    Only one submission is in flight at a time; calling :meth:`submit` while a
    request is outstanding raises :class:`~portfolio.client.state.InvalidTransition`.
    """

    def __init__(
        self,
        endpoint: str,
        view: View,
        client: httpx.Client | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.view = view
        self.state = FormState()
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def __enter__(self) -> SubmissionController:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def submit(self, form: Mapping[str, str]) -> FormState:
        self.state = fsm.begin_validation(self.state)
        self.view.hide_error()
        self.view.clear_annotations()

        field_errors = validate_by_field(sanitize_form(form))
        if field_errors:
            self.state = fsm.validation_failed(self.state, field_errors)
            self.view.annotate(field_errors)
            return self.state

        self.state = fsm.begin_submission(self.state)
        self.view.set_busy(True, self.state.busy_label)
        try:
            response = self._client.post(self.endpoint, data=dict(form))
            self.state = self._apply_response(response)
        except httpx.TransportError as exc:
            logger.warning("Contact submission to %s failed: %s", self.endpoint, exc)
            self.state = fsm.network_failed(self.state)
        except httpx.HTTPError as exc:
            logger.warning("Contact submission to %s errored: %s", self.endpoint, exc)
            self.state = fsm.submission_failed(self.state, fsm.SERVER_ERROR_MESSAGE)
        finally:
            self.state = fsm.release_submit(self.state)
            self.view.set_busy(False, None)

        self._render()
        return self.state

    def expire(self) -> FormState:
        """Called by the view once the current display duration has elapsed."""
        if self.state.phase is FormPhase.SUCCESS:
            self.state = fsm.reset(self.state)
            self.view.reset_form()
        elif self.state.phase is FormPhase.ERROR:
            self.state = fsm.dismiss_banner(self.state)
            self.view.hide_error()
        return self.state

    def _apply_response(self, response: httpx.Response) -> FormState:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            return fsm.submission_failed(self.state, fsm.SERVER_ERROR_MESSAGE)
        if payload.get("success") is True:
            return fsm.submission_succeeded(self.state, payload.get("message"))
        return fsm.submission_failed(self.state, payload.get("message"))

    def _render(self) -> None:
        if self.state.phase is FormPhase.SUCCESS:
            self.view.show_success(self.state.confirmation, self.state.display_seconds)
        elif self.state.phase is FormPhase.ERROR:
            self.view.show_error(self.state.banner, self.state.display_seconds)
