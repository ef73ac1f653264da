"""
repositories/booking_repo.py
----------------------------
Data access layer for bookings.
"""

from typing import Iterable, List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import Booking, BookingStatus


class BookingRepository:
    """Repository for CRUD operations on the bookings table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, service_id: int, user_id: int, sub_id: int) -> Booking:
        """
        Insert a booking; status takes the column default ('in progress').

        Raises:
            sqlalchemy.exc.IntegrityError: If the service, subcategory or user is missing.
        """
        result = await self.session.execute(
            insert(Booking)
            .values(service_id=service_id, user_id=user_id, sub_id=sub_id)
            .returning(Booking)
        )
        return result.scalar_one()

    async def list_by_user(self, user_id: int) -> List[Booking]:
        result = await self.session.execute(
            select(Booking).where(Booking.user_id == user_id).order_by(Booking.id)
        )
        return list(result.scalars().all())

    async def booked_service_ids(self, service_ids: Iterable[int]) -> List[int]:
        """Distinct ids among `service_ids` that have at least one booking."""
        ids = list(service_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(Booking.service_id)
            .where(Booking.service_id.in_(ids))
            .distinct()
            .order_by(Booking.service_id)
        )
        return list(result.scalars().all())

    async def list_by_services(self, service_ids: Iterable[int]) -> List[Booking]:
        ids = list(service_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(Booking).where(Booking.service_id.in_(ids)).order_by(Booking.id)
        )
        return list(result.scalars().all())

    async def update_status(self, booking_id: int, status: BookingStatus) -> Optional[Booking]:
        result = await self.session.execute(
            update(Booking)
            .where(Booking.id == booking_id)
            .values(status=status)
            .returning(Booking)
            .execution_options(synchronize_session="fetch")
        )
        return result.scalar_one_or_none()
