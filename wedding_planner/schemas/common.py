"""
Wedding Planner Backend — Shared Schemas
==========================================

What:  Response shapes used by more than one resource: error bodies, bare
       confirmation messages and the health report.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation, e.g. after deleting an appointment."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Fields:
        error: Human-readable description (the field existing clients read)
        kind: Machine-readable error class (e.g. "validation_error", "not_found")
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "User not found",
            "kind": "not_found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Human-readable error description")
    kind: str = Field(description="Machine-readable error class")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check result for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
