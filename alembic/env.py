"""Alembic environment for the contact service."""

from __future__ import annotations

from logging.config import fileConfig

from alembic import context
from portfolio.config import settings
from portfolio.database import Base, engine, ensure_sqlite_directory
from portfolio.models import contact  # noqa: F401 - registers contact_messages

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL without a DB connection."""
    context.configure(
        url=settings.resolved_database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations against the configured engine."""
    ensure_sqlite_directory(settings.resolved_database_url)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
