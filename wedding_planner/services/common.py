"""
services/common.py
------------------
Helpers shared by every service: required-field checks and translation of
database integrity errors into client-facing exceptions.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy.exc import IntegrityError

from wedding_planner.exceptions import ConflictError, ValidationError

UNIQUE_VIOLATION = "unique"
FOREIGN_KEY_VIOLATION = "foreign_key"

# PostgreSQL SQLSTATE codes
_SQLSTATE_KINDS = {
    "23505": UNIQUE_VIOLATION,
    "23503": FOREIGN_KEY_VIOLATION,
}


def is_missing(value: Any) -> bool:
    """A required field is missing when absent, null or an empty string."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def any_missing(*values: Any) -> bool:
    return any(is_missing(value) for value in values)


def integrity_violation(exc: IntegrityError) -> Optional[str]:
    """
    Classify an IntegrityError as a unique or foreign-key violation.

    asyncpg errors expose the SQLSTATE; SQLite only gives a message.
    """
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[code]

    message = str(orig).upper()
    if "UNIQUE CONSTRAINT" in message:
        return UNIQUE_VIOLATION
    if "FOREIGN KEY CONSTRAINT" in message:
        return FOREIGN_KEY_VIOLATION
    return None


@contextmanager
def integrity_guard(
    foreign_key_message: str,
    unique_message: Optional[str] = None,
) -> Iterator[None]:
    """
    Turn constraint violations raised inside the block into API errors.

    Foreign-key violations become ValidationError (400); unique violations
    become ConflictError (409) when `unique_message` is given. Anything else
    propagates unchanged.
    """
    try:
        yield
    except IntegrityError as exc:
        violation = integrity_violation(exc)
        if violation == UNIQUE_VIOLATION and unique_message:
            raise ConflictError(unique_message) from exc
        if violation == FOREIGN_KEY_VIOLATION:
            raise ValidationError(foreign_key_message) from exc
        raise
