"""
Wedding Planner Backend — Payment Model
=========================================

What:  ORM model for `payments`, a deposit record attached to a booking.
       Only the record is stored; no payment gateway is involved.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base


class Payment(Base):
    """A deposit paid against a booking (cascades with the booking)."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    booking_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("bookings.id", ondelete="CASCADE"),
    )
    deposit: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    reference_number: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, booking_id={self.booking_id}, deposit={self.deposit})>"
