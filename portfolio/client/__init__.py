"""Python client for the contact endpoint, mirroring the browser form."""

from portfolio.client.controller import SubmissionController, View  # noqa: F401
from portfolio.client.state import FormPhase, FormState, InvalidTransition  # noqa: F401

__all__ = [
    "FormPhase",
    "FormState",
    "InvalidTransition",
    "SubmissionController",
    "View",
]
