"""
Wedding Planner Backend — Password Hashing
============================================

What:  One-way salted password hashing and verification with bcrypt.
How:   bcrypt is CPU-bound, so both calls run in Starlette's threadpool to
       keep the event loop responsive.

Compatibility:
    Hashes use the standard $2b$ format and verification accepts the $2a$
    hashes written by earlier releases. bcrypt only reads the first 72 bytes
    of a password; longer inputs are truncated before hashing and checking.
"""

import logging
from typing import Optional

import bcrypt
from starlette.concurrency import run_in_threadpool

from wedding_planner.config import settings

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def _hash_sync(password: str, rounds: int) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _verify_sync(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash has an unrecognized format")
        return False


async def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plain password with a fresh salt."""
    return await run_in_threadpool(_hash_sync, password, rounds or settings.bcrypt_rounds)


async def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plain password with a stored hash (bcrypt's constant-time check)."""
    return await run_in_threadpool(_verify_sync, password, password_hash)
