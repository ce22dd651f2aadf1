"""Pydantic schemas for contact form records and responses."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

MAX_IP_LENGTH = 45
MAX_USER_AGENT_LENGTH = 512


class ContactRecord(BaseModel):
    """A validated submission ready to be persisted."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., max_length=255)
    subject: str = Field(..., min_length=3, max_length=255)
    reason: str
    message: str = Field(..., min_length=10, max_length=5000)
    ip_address: str | None = Field(None, max_length=MAX_IP_LENGTH)
    user_agent: str | None = None

    @classmethod
    def from_fields(
        cls,
        fields: Mapping[str, str],
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> ContactRecord:
        """Build a record from sanitized form fields keyed by form name."""
        if ip_address:
            ip_address = ip_address[:MAX_IP_LENGTH]
        if user_agent:
            user_agent = user_agent[:MAX_USER_AGENT_LENGTH]
        return cls(
            full_name=fields["fullname"],
            email=fields["email"],
            subject=fields["subject"],
            reason=fields["reason"],
            message=fields["message"],
            ip_address=ip_address,
            user_agent=user_agent,
        )


class ContactResponse(BaseModel):
    """JSON body returned by the submission endpoint."""

    success: bool
    message: str
    errors: list[str] | None = None
    id: int | None = None
