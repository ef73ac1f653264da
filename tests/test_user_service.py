"""
Wedding Planner Backend — User Service Unit Tests
===================================================

What:  Registration, lookup and login rules.
How:   UserRepository is patched; password hashing runs for real at 4 rounds.

What we test:
    ✅ Missing fields and unknown roles are rejected before any insert
    ✅ Passwords are stored hashed
    ✅ Duplicate email becomes a 409 ConflictError
    ✅ Unknown email and wrong password raise the same AuthenticationError
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import IntegrityError

from wedding_planner.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from wedding_planner.schemas.user import UserCreate
from wedding_planner.security import hash_password
from wedding_planner.services.user_service import UserService


def _unique_violation() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO users ...",
        {},
        Exception("UNIQUE constraint failed: users.email"),
    )


class TestRegister:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["email", "full_name", "password"])
    async def test_missing_required_field(self, mock_db_session, missing):
        body = {"email": "a@example.com", "full_name": "Anna", "password": "pw"}
        body[missing] = ""

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            with pytest.raises(ValidationError, match="Missing required fields"):
                await self.service.register(mock_db_session, UserCreate(**body))
            repo_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_role_rejected(self, mock_db_session):
        payload = UserCreate(email="a@example.com", full_name="Anna", password="pw", role="admin")

        with pytest.raises(ValidationError, match="Role must be one of: client, vendor"):
            await self.service.register(mock_db_session, payload)

    @pytest.mark.asyncio
    async def test_password_is_hashed_before_insert(self, mock_db_session, sample_user):
        payload = UserCreate(email=sample_user.email, full_name=sample_user.full_name, password="pw")

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo = repo_cls.return_value
            repo.create = AsyncMock(return_value=sample_user)

            result = await self.service.register(mock_db_session, payload)

            kwargs = repo.create.await_args.kwargs
            assert kwargs["password_hash"] != "pw"
            assert kwargs["password_hash"].startswith("$2b$")
            assert kwargs["role"] == "client"
            assert result.id == sample_user.id
            assert result.email == sample_user.email

    @pytest.mark.asyncio
    async def test_vendor_role_passed_through(self, mock_db_session, sample_user):
        payload = UserCreate(email="v@example.com", full_name="Vic", password="pw", role="vendor")

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo_cls.return_value.create = AsyncMock(return_value=sample_user)
            await self.service.register(mock_db_session, payload)

            assert repo_cls.return_value.create.await_args.kwargs["role"] == "vendor"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflict(self, mock_db_session):
        payload = UserCreate(email="a@example.com", full_name="Anna", password="pw")

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo_cls.return_value.create = AsyncMock(side_effect=_unique_violation())

            with pytest.raises(ConflictError, match="Email already registered"):
                await self.service.register(mock_db_session, payload)


class TestGetUser:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_found(self, mock_db_session, sample_user):
        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo_cls.return_value.get = AsyncMock(return_value=sample_user)
            result = await self.service.get_user(mock_db_session, 1)

        assert result.full_name == "Anna Smith"
        assert result.password == sample_user.password

    @pytest.mark.asyncio
    async def test_not_found(self, mock_db_session):
        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo_cls.return_value.get = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError, match="User not found"):
                await self.service.get_user(mock_db_session, 999)


class TestLogin:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_missing_credentials(self, mock_db_session):
        with pytest.raises(ValidationError, match="Missing email or password"):
            await self.service.login(mock_db_session, "a@example.com", None)

    @pytest.mark.asyncio
    async def test_success(self, mock_db_session, sample_user):
        sample_user.password = await hash_password("correct", rounds=4)

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo_cls.return_value.get_by_email = AsyncMock(return_value=sample_user)
            result = await self.service.login(mock_db_session, sample_user.email, "correct")

        assert result.message == "Login successful"
        assert result.user.id == sample_user.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, mock_db_session, sample_user):
        sample_user.password = await hash_password("correct", rounds=4)

        with patch("wedding_planner.services.user_service.UserRepository") as repo_cls:
            repo = repo_cls.return_value

            repo.get_by_email = AsyncMock(return_value=sample_user)
            with pytest.raises(AuthenticationError) as wrong_password:
                await self.service.login(mock_db_session, sample_user.email, "wrong")

            repo.get_by_email = AsyncMock(return_value=None)
            with pytest.raises(AuthenticationError) as unknown_email:
                await self.service.login(mock_db_session, "nobody@example.com", "correct")

        assert wrong_password.value.message == unknown_email.value.message == "Invalid email or password"
