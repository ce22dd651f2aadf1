"""Persistence gateway for contact form submissions."""

from __future__ import annotations

import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from portfolio.database import SessionLocal, session_scope
from portfolio.models.contact import ContactMessage
from portfolio.schemas.contact import ContactRecord

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when a contact message could not be stored."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ContactStore:
    """Insert contact messages through a per-call session scope."""

    def __init__(self, session_factory: sessionmaker = SessionLocal) -> None:
        self._session_factory = session_factory

    def save(self, record: ContactRecord) -> int:
        """Insert one row and return the id generated by the database.

        The session is released on every path; any database failure is
        logged and re-raised as :class:`PersistenceError`.
        """
        stmt = insert(ContactMessage.__table__).values(
            full_name=record.full_name,
            email=record.email,
            subject=record.subject,
            reason=record.reason,
            message=record.message,
            ip_address=record.ip_address,
            user_agent=record.user_agent,
        )
        try:
            with session_scope(self._session_factory) as session:
                result = session.execute(stmt)
                new_id = result.inserted_primary_key[0]
        except SQLAlchemyError as exc:
            logger.error("Form submission error: %s", exc, exc_info=True)
            raise PersistenceError(str(exc)) from exc
        logger.info("Stored contact message id=%s reason=%s", new_id, record.reason)
        return int(new_id)


contact_store = ContactStore()


def get_contact_store() -> ContactStore:
    """Dependency hook so tests can swap the session factory."""
    return contact_store
