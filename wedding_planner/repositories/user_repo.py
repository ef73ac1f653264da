"""
repositories/user_repo.py
-------------------------
Data access layer for user records.
"""

from typing import Iterable, List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import User


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        email: str,
        full_name: str,
        password_hash: str,
        contact_number: Optional[str] = None,
        address: Optional[str] = None,
        role: Optional[str] = None,
    ) -> User:
        """
        Insert a user and return the stored row.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already registered.
        """
        values = {
            "email": email,
            "full_name": full_name,
            "contact_number": contact_number,
            "address": address,
            "password": password_hash,
        }
        if role is not None:
            values["role"] = role
        result = await self.session.execute(insert(User).values(**values).returning(User))
        return result.scalar_one()

    async def get(self, user_id: int) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_many(self, user_ids: Iterable[int]) -> List[User]:
        ids = list(user_ids)
        if not ids:
            return []
        result = await self.session.execute(select(User).where(User.id.in_(ids)))
        return list(result.scalars().all())
