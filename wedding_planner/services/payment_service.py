"""
Wedding Planner Backend — Payment Service
===========================================

What:  Records deposits against bookings. No gateway, no refunds; a payment
       is only ever a stored row.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import ValidationError
from wedding_planner.repositories import PaymentRepository
from wedding_planner.schemas.booking import PaymentCreate, PaymentResponse
from wedding_planner.services.common import any_missing, integrity_guard

logger = logging.getLogger(__name__)


class PaymentService:

    async def record_deposit(self, db: AsyncSession, payload: PaymentCreate) -> PaymentResponse:
        """
        Raises:
            ValidationError: a field is missing, the deposit is not positive,
                             or the booking does not exist
        """
        if any_missing(payload.booking_id, payload.deposit, payload.reference_number):
            raise ValidationError("booking_id, deposit, and reference_number are required")
        if payload.deposit <= 0:
            raise ValidationError("deposit must be a positive amount", field="deposit")

        with integrity_guard(foreign_key_message="booking_id must reference an existing booking"):
            payment = await PaymentRepository(db).create(
                booking_id=payload.booking_id,
                deposit=payload.deposit,
                reference_number=payload.reference_number,
            )

        logger.info("Deposit %s recorded for booking %s", payment.id, payment.booking_id)
        return PaymentResponse.model_validate(payment)


# ── Singleton Instance ────────────────────────────────────────────────────
payment_service = PaymentService()
