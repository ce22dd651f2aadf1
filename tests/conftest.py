"""Test fixtures for API and database."""

from __future__ import annotations

import os
from pathlib import Path

TESTS_ROOT = Path(__file__).parent

# Set DATABASE_URL *before* importing portfolio modules so the app doesn't try
# to open the default database path.
os.environ.setdefault("DATABASE_URL", "sqlite:///test_portfolio.db")
os.environ.setdefault("EMAIL_ENABLED", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from portfolio.database import Base  # noqa: E402
from portfolio.database import get_db as db_dependency  # noqa: E402
from portfolio.main import app  # noqa: E402
from portfolio.models import contact  # noqa: E402,F401 - ensure metadata is populated
from portfolio.services.contact_store import ContactStore, get_contact_store  # noqa: E402

TEST_DB_PATH = Path("test_portfolio.db")
TESTING_SESSION_FACTORY: sessionmaker | None = None

VALID_FORM = {
    "fullname": "Jane Doe",
    "email": "jane@example.com",
    "subject": "Hello",
    "reason": "job",
    "message": "I would like to connect regarding an opportunity.",
}


@pytest.fixture(scope="session")
def client():
    global TESTING_SESSION_FACTORY
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()

    engine = create_engine(
        f"sqlite:///{TEST_DB_PATH}",
        connect_args={"check_same_thread": False},
    )
    TESTING_SESSION_FACTORY = sessionmaker(
        bind=engine, autocommit=False, autoflush=False
    )
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TESTING_SESSION_FACTORY()
        try:
            yield db
        finally:
            db.close()

    test_store = ContactStore(TESTING_SESSION_FACTORY)

    app.dependency_overrides[db_dependency] = override_get_db
    app.dependency_overrides[get_contact_store] = lambda: test_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(db_dependency, None)
    app.dependency_overrides.pop(get_contact_store, None)
    engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture
def db_session(client):
    if TESTING_SESSION_FACTORY is None:
        raise RuntimeError("Session factory not initialized")
    session = TESTING_SESSION_FACTORY()
    try:
        yield session
    finally:
        # Ensure database state is isolated between tests
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture
def session_factory(client) -> sessionmaker:
    if TESTING_SESSION_FACTORY is None:
        raise RuntimeError("Session factory not initialized")
    return TESTING_SESSION_FACTORY


@pytest.fixture
def valid_form() -> dict[str, str]:
    return dict(VALID_FORM)
