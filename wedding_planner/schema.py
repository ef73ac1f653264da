"""
Wedding Planner Backend — Schema Initializer
==============================================

What:  Provisions the database and its tables on startup, idempotently.
When:  Called from the application lifespan before the server accepts
       requests; also runnable on its own:

           python -m wedding_planner.schema

Steps:
    1. ensure_database(): CREATE DATABASE on the maintenance connection.
       "already exists" (SQLSTATE 42P04) is logged and treated as success.
    2. create_tables(): create each table and the booking_status enum only
       if absent. SQLAlchemy orders the DDL by foreign-key dependency:
           users → services → subcategories → appointments
           → booking_status → bookings → payments, wedding_plans

Failure policy:
    Neither step raises. Errors are logged and startup continues; a partially
    provisioned schema shows up later as failing queries (500 responses).
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from wedding_planner.config import Settings
from wedding_planner.database import Base, Database
import wedding_planner.models  # noqa: F401  (registers every table on Base.metadata)

logger = logging.getLogger(__name__)

DUPLICATE_DATABASE = "42P04"


def _sqlstate(exc: DBAPIError) -> Optional[str]:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


async def ensure_database(settings: Settings) -> None:
    """
    Create the target database if it does not exist yet.

    Skipped for non-PostgreSQL URLs (e.g. the SQLite test database) and when
    CREATE_DATABASE_ON_STARTUP is false.
    """
    target = settings.database_url_parsed
    if not settings.create_database_on_startup or target.get_backend_name() != "postgresql":
        return

    # CREATE DATABASE cannot run inside a transaction block
    engine = create_async_engine(
        settings.maintenance_url,
        isolation_level="AUTOCOMMIT",
        poolclass=NullPool,
    )
    try:
        async with engine.connect() as conn:
            name = conn.dialect.identifier_preparer.quote(target.database)
            await conn.execute(text(f"CREATE DATABASE {name}"))
        logger.info("Database '%s' created successfully", target.database)
    except DBAPIError as e:
        if _sqlstate(e) == DUPLICATE_DATABASE:
            logger.info("Database '%s' already exists", target.database)
        else:
            logger.error("Error creating database '%s': %s", target.database, e)
    except Exception as e:
        logger.error("Error creating database '%s': %s", target.database, e)
    finally:
        await engine.dispose()


async def create_tables(engine: AsyncEngine) -> bool:
    """
    Create all tables and the booking_status enum if absent.

    Returns:
        True when the DDL completed, False when it failed (already logged).
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        logger.info("Tables created successfully or already exist")
        return True
    except Exception as e:
        logger.error("Error creating tables: %s", e, exc_info=True)
        return False


async def initialize_database(settings: Settings, database: Database) -> None:
    """Run both provisioning steps against the given store handle."""
    await ensure_database(settings)
    await create_tables(database.engine)


async def _main() -> None:
    from wedding_planner.config import settings
    from wedding_planner.main import setup_logging

    setup_logging()
    database = Database.from_settings(settings)
    try:
        await initialize_database(settings, database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
