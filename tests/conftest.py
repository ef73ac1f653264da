"""
Wedding Planner Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sqlite_database: Database handle on a throwaway SQLite file with
    │                    foreign keys enforced and all tables created
    ├── api_client:      HTTPX AsyncClient over an app using sqlite_database
    └── test_client:     HTTPX AsyncClient over an app with a mocked session
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["CREATE_DATABASE_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"  # Fast hashing for tests

from decimal import Decimal
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

from wedding_planner.database import Database, get_db_session
from wedding_planner.main import create_app
from wedding_planner.models import Booking, BookingStatus, Payment, Service, Subcategory, User
from wedding_planner.schema import create_tables


# ══════════════════════════════════════════════════════════════════════════
# Mocked Session
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Services hand the session to repositories; unit tests patch the
    repository classes, so the session itself only needs to exist.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.scalars = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(mock_db_session) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for route tests that patch the service layer.

    The session dependency is overridden with the mock session, so no
    database is touched. Unhandled errors come back as 500 responses.
    """
    app = create_app(initialize_schema=False)

    async def _mock_session():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = _mock_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Real Store (SQLite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def sqlite_database(tmp_path) -> AsyncGenerator[Database, None]:
    """
    A Database handle backed by a fresh SQLite file.

    SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked to,
    once per connection.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'wedding_planner.db'}")

    @event.listens_for(database.engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    assert await create_tables(database.engine)
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def api_client(sqlite_database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for end-to-end tests against the SQLite store."""
    app = create_app(database=sqlite_database, initialize_schema=False)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Sample Rows
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_user():
    return User(
        id=1,
        email="anna@example.com",
        full_name="Anna Smith",
        contact_number="0712345678",
        address="12 Rose Lane",
        password="$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnot",
        role="client",
    )


@pytest.fixture
def sample_service():
    return Service(id=10, title="Photography", description="Wedding day coverage", user_id=2)


@pytest.fixture
def sample_subcategory():
    return Subcategory(
        id=100,
        service_id=10,
        name="Gold",
        price=Decimal("1200.00"),
        short_description="Full day",
        file_url=None,
    )


@pytest.fixture
def sample_booking():
    return Booking(id=50, user_id=1, service_id=10, sub_id=100, status=BookingStatus.IN_PROGRESS)


@pytest.fixture
def sample_payment():
    return Payment(id=7, booking_id=50, deposit=Decimal("300.00"), reference_number="REF-001")
