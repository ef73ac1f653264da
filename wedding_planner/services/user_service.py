"""
Wedding Planner Backend — User Service
========================================

What:  Registration, lookup and login.
Who:   Called by the /adduser, /users/{id} and /login route handlers.

Login contract:
    An unknown email and a wrong password raise the same AuthenticationError,
    so the 401 response never reveals which of the two happened.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import AuthenticationError, NotFoundError, ValidationError
from wedding_planner.models.user import ROLE_CLIENT, ROLES
from wedding_planner.repositories import UserRepository
from wedding_planner.schemas.user import LoginResponse, UserCreate, UserResponse
from wedding_planner.security import hash_password, verify_password
from wedding_planner.services.common import any_missing, integrity_guard

logger = logging.getLogger(__name__)


class UserService:
    """Business logic for user accounts."""

    async def register(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        """
        Create a user with a bcrypt-hashed password.

        Raises:
            ValidationError: email, full_name or password missing; unknown role
            ConflictError: email already registered
        """
        if any_missing(payload.email, payload.full_name, payload.password):
            raise ValidationError("Missing required fields")

        role = payload.role or ROLE_CLIENT
        if role not in ROLES:
            raise ValidationError(
                f"Role must be one of: {', '.join(ROLES)}",
                field="role",
            )

        password_hash = await hash_password(payload.password)

        with integrity_guard(
            foreign_key_message="Invalid user data",
            unique_message="Email already registered",
        ):
            user = await UserRepository(db).create(
                email=payload.email,
                full_name=payload.full_name,
                password_hash=password_hash,
                contact_number=payload.contact_number,
                address=payload.address,
                role=role,
            )

        logger.info("Registered user %s (role=%s)", user.id, user.role)
        return UserResponse.model_validate(user)

    async def get_user(self, db: AsyncSession, user_id: int) -> UserResponse:
        user = await UserRepository(db).get(user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return UserResponse.model_validate(user)

    async def login(self, db: AsyncSession, email: Optional[str], password: Optional[str]) -> LoginResponse:
        """
        Check credentials against the stored hash.

        Raises:
            ValidationError: email or password missing
            AuthenticationError: unknown email or wrong password
        """
        if any_missing(email, password):
            raise ValidationError("Missing email or password")

        user = await UserRepository(db).get_by_email(email)
        if user is None or not await verify_password(password, user.password):
            logger.info("Failed login attempt")
            raise AuthenticationError()

        logger.info("User %s logged in", user.id)
        return LoginResponse(user=UserResponse.model_validate(user))


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
