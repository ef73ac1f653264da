"""
repositories/payment_repo.py
----------------------------
Data access layer for deposit payments.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import Payment


class PaymentRepository:
    """Repository for the payments table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, booking_id: int, deposit: Decimal, reference_number: str) -> Payment:
        result = await self.session.execute(
            insert(Payment)
            .values(booking_id=booking_id, deposit=deposit, reference_number=reference_number)
            .returning(Payment)
        )
        return result.scalar_one()

    async def first_for_booking(self, booking_id: int) -> Optional[Payment]:
        """Earliest payment recorded for a booking, if any."""
        result = await self.session.execute(
            select(Payment)
            .where(Payment.booking_id == booking_id)
            .order_by(Payment.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
