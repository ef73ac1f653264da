"""
Wedding Planner Backend — Alembic Environment
===============================================

What:  Runs the revisions under alembic/versions against the database named
       by DATABASE_URL (wedding_planner.config), using the async engine.
Who:   `alembic upgrade head` / `alembic downgrade base` in deployments that
       manage the schema explicitly.

Relationship to the startup initializer:
    wedding_planner.schema creates missing tables from Base.metadata on every
    start. Revision 001 builds the same seven tables, and
    tests/test_migrations.py keeps the two in step. Starting the app after an
    upgrade is a no-op for the initializer; the reverse order is not supported.

PostgreSQL only:
    Revision 001 creates the native `booking_status` enum type before the
    bookings table and drops it after; it is not meant for SQLite.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from wedding_planner.config import settings
from wedding_planner.database import Base

# Every table must be on Base.metadata for `alembic revision --autogenerate`
import wedding_planner.models  # noqa: F401

# Alembic Config object, gives access to alembic.ini values
config = context.config

# Setup logging from alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# alembic.ini carries no URL; DATABASE_URL is the only source
config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Emits the SQL to stdout without connecting to the database.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations in 'online' mode with async engine.

    How:   Creates an async engine, runs migrations in a sync context via
           connection.run_sync().
    """
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
