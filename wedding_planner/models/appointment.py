"""
Wedding Planner Backend — Appointment Model
=============================================

What:  ORM model for `appointments`, a meeting scheduled between a client and
       a vendor. Independent of bookings.

Status:
    A nullable BOOLEAN, not the booking_status enum. NULL means "not yet
    decided"; the two status notions are kept apart on purpose.

Foreign keys:
    client_id and vendor_id reference users(id) with no ON DELETE action, so
    a user with appointments cannot be deleted at the database level.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Text, Time, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base


class Appointment(Base):
    """A client/vendor meeting on a given date and time."""

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    time: Mapped[dt.time] = mapped_column(Time, nullable=False)
    additional_info: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    client_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    vendor_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    status: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    created_at: Mapped[Optional[dt.datetime]] = mapped_column(
        DateTime,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Appointment(id={self.id}, date='{self.date}', "
            f"client_id={self.client_id}, vendor_id={self.vendor_id})>"
        )
