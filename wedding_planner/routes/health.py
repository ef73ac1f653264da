"""
Wedding Planner Backend — Health Check Route
==============================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 through the application's Database handle.

Status levels:
    - healthy:   the database answered
    - unhealthy: the database could not be reached
"""

import logging

from fastapi import APIRouter, Request

from wedding_planner import __version__
from wedding_planner.database import get_database
from wedding_planner.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the backend can reach its PostgreSQL database.",
)
async def health_check(request: Request) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await get_database(request).ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(status=overall, version=__version__, database=db_status)
