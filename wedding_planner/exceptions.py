"""
Wedding Planner Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the error classes the API exposes.
How:   Each exception carries a client-safe message and an optional context
       dict (logged, never returned). Global handlers registered in main.py
       turn them into `{"error": message, "kind": ..., "request_id": ...}`
       responses with the matching HTTP status.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    WeddingPlannerError (base)
    ├── ValidationError        → 400 Bad Request (client can fix)
    ├── AuthenticationError    → 401 Unauthorized
    ├── NotFoundError          → 404 Not Found
    └── ConflictError          → 409 Conflict

Store failures are not wrapped: SQLAlchemy errors reach their own handler and
become a generic 500.
"""

from typing import Any, Dict, Optional


class WeddingPlannerError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    kind: str = "internal_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(WeddingPlannerError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, malformed subcategory JSON, unknown enum
             values, references to rows that do not exist.
    HTTP:    400 Bad Request
    """

    status_code = 400
    kind = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(WeddingPlannerError):
    """
    Raised when login credentials do not match.

    The message is the same for an unknown email and a wrong password.
    HTTP:    401 Unauthorized
    """

    status_code = 401
    kind = "authentication_error"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message)


class NotFoundError(WeddingPlannerError):
    """
    Raised when a lookup by id or relation yields nothing.

    Repositories return None / empty lists; services convert that into this
    exception where the endpoint contract calls for a 404.
    HTTP:    404 Not Found
    """

    status_code = 404
    kind = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(WeddingPlannerError):
    """
    Raised when a write collides with existing data (duplicate email).
    HTTP:    409 Conflict
    """

    status_code = 409
    kind = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
