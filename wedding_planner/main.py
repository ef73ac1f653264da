"""
Wedding Planner Backend — FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn wedding_planner.main:app) and by the tests,
       which inject their own Database handle.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                     FastAPI App                          │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌───────────┐ ┌──────────┐                 │
    │  │ Req ID   │→│  Logging  │→│   CORS   │                 │
    │  └──────────┘ └───────────┘ └──────────┘                 │
    │                                                          │
    │  Routes:                                                 │
    │  users · services · appointments · bookings · payments   │
    │  wedding_plans · health                                  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ Auth→401 │ NotFound→404 │ Conflict→409 │
    │  SQLAlchemy→500 │ Exception→500                          │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the Database handle (unless one was injected)
    3. Create the database and tables if missing
    Shutdown:
    1. Dispose the engine the app built itself
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from wedding_planner import __version__
from wedding_planner.config import Settings, settings as default_settings
from wedding_planner.database import Database
from wedding_planner.exceptions import WeddingPlannerError
from wedding_planner.middleware.logging import RequestLoggingMiddleware
from wedding_planner.middleware.request_id import RequestIDMiddleware, request_id_var
from wedding_planner.routes import (
    appointments,
    bookings,
    health,
    payments,
    services,
    users,
    wedding_plans,
)
from wedding_planner.schema import initialize_database

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_REQUEST_PARTS = {"body", "path", "query", "header", "cookie"}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    level = level or default_settings.log_level

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, store handle, schema. Shutdown: close the pool.

    A Database injected through create_app() belongs to the caller and is
    left open on shutdown.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Wedding Planner Backend starting up...")

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database.from_settings(app_settings)
    database: Database = app.state.database

    if app.state.initialize_schema:
        await initialize_database(app_settings, database)

    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)
    logger.info("API docs: http://%s:%d/docs", app_settings.host, app_settings.port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Wedding Planner Backend shutting down...")
    if owns_database:
        await database.dispose()
        app.state.database = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, kind: str, rid: str) -> dict:
    return {"error": message, "kind": kind, "request_id": rid}


def _invalid_field_message(exc: RequestValidationError) -> str:
    """'Invalid <field>' for the first failing input, e.g. 'Invalid user_id'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    names = [
        str(part)
        for part in errors[0].get("loc", ())
        if isinstance(part, str) and part not in _REQUEST_PARTS
    ]
    if not names:
        return "Invalid request body"
    return f"Invalid {names[-1]}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        WeddingPlannerError subclasses → their own status_code and kind
        RequestValidationError         → 400 validation_error
        SQLAlchemyError                → 500 database_error
        Exception (fallback)           → 500 internal_error

    Every body is {"error": ..., "kind": ..., "request_id": ...}. Internal
    details (SQL, stack traces) are logged server-side only.
    """

    @app.exception_handler(WeddingPlannerError)
    async def handle_application_error(request: Request, exc: WeddingPlannerError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, exc.kind, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, exc.kind, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.kind, rid),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Unparseable JSON, wrong field types and non-numeric path ids."""
        rid = request_id_var.get("")
        message = _invalid_field_message(exc)
        logger.warning("[%s] Request validation failed: %s", rid, message)
        return JSONResponse(
            status_code=400,
            content=_error_body(message, "validation_error", rid),
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(INTERNAL_ERROR_MESSAGE, "database_error", rid),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(INTERNAL_ERROR_MESSAGE, "internal_error", rid),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    initialize_schema: bool = True,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings:          Configuration; defaults to the environment-loaded one
        database:          Pre-built store handle (tests inject a SQLite one);
                           built from settings during startup when omitted
        initialize_schema: Run the database/table initializer on startup

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Wedding Planner API",
        description=(
            "Backend for a wedding-planning marketplace: clients book vendor "
            "services, schedule appointments, record deposits and keep a "
            "wedding checklist."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.initialize_schema = initialize_schema

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=settings.cors_methods_list,
        allow_headers=settings.cors_headers_list,
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(services.router)
    app.include_router(appointments.router)
    app.include_router(bookings.router)
    app.include_router(payments.router)
    app.include_router(wedding_plans.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `wedding_planner.main:app` to be importable
app = create_app()
