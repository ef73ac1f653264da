"""
Wedding Planner Backend — Database Session Management
=======================================================

What:  The store handle (async engine + session factory), the declarative
       base for ORM models, and the per-request session dependency.
How:   `Database` is built explicitly by the application factory and stored on
       `app.state.database`; `get_db_session` pulls it from there for each
       request. Nothing here opens a connection at import time.
Who:   Route handlers (via Depends), the schema initializer and the health check.

Unit of work:
    One AsyncSession per request. The dependency commits when the handler
    returns normally and rolls back when it raises, so every write a request
    makes lands together or not at all.
"""

from typing import Any, AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from wedding_planner.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata object; the schema initializer and Alembic
    both build the schema from it.
    """
    pass


class Database:
    """
    Explicitly constructed store handle shared by every request.

    Attributes:
        engine:          AsyncEngine owning the connection pool
        session_factory: async_sessionmaker producing request-scoped sessions
    """

    def __init__(self, url: "str | URL", **engine_kwargs: Any):
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the handle with pool sizing from configuration."""
        kwargs: dict = {"echo": settings.log_level == "DEBUG"}
        if settings.database_url_parsed.get_backend_name() == "postgresql":
            kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return cls(settings.database_url, **kwargs)

    async def ping(self) -> bool:
        """Run SELECT 1; used by the health check."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """Close every pooled connection (application shutdown)."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database handle is not configured on the application")
    return database


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the application's Database handle
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/appointments")
        async def list_appointments(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
