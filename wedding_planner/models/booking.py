"""
Wedding Planner Backend — Booking Model
=========================================

What:  ORM model for `bookings`, a client's reservation of one subcategory of
       a service, plus the `booking_status` PostgreSQL enum.

Foreign keys:
    user_id    → users(id)          ON DELETE SET NULL (booking outlives the user)
    service_id → services(id)       ON DELETE CASCADE
    sub_id     → subcategories(id)  ON DELETE CASCADE

Status lifecycle:
    'in progress' (default) → 'confirmed' → 'completed'
    The enum stores the lowercase values (with the space), not member names.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base


class BookingStatus(str, enum.Enum):
    IN_PROGRESS = "in progress"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


booking_status_type = Enum(
    BookingStatus,
    name="booking_status",
    values_callable=lambda members: [member.value for member in members],
    validate_strings=True,
)


class Booking(Base):
    """A reservation of a subcategory by a user."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
    )
    service_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("services.id", ondelete="CASCADE"),
    )
    sub_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("subcategories.id", ondelete="CASCADE"),
    )
    status: Mapped[Optional[BookingStatus]] = mapped_column(
        booking_status_type,
        default=BookingStatus.IN_PROGRESS,
        server_default=text("'in progress'"),
    )
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, user_id={self.user_id}, "
            f"service_id={self.service_id}, status='{self.status}')>"
        )
