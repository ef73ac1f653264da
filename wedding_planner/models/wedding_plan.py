"""
Wedding Planner Backend — Wedding Plan Model
==============================================

What:  ORM model for `wedding_plans`: a per-user budget plus seven checklist
       flags. Unrelated to bookings and appointments in the data model.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, false, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base

# Checklist columns, in table order
CHECKLIST_ITEMS = (
    "venue",
    "decor",
    "catering",
    "entertainment",
    "photographer",
    "wedding_cake",
    "transportation",
)


def _checklist_flag() -> Mapped[Optional[bool]]:
    return mapped_column(Boolean, default=False, server_default=false())


class WeddingPlan(Base):
    """A user's wedding checklist."""

    __tablename__ = "wedding_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    budget: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    venue: Mapped[Optional[bool]] = _checklist_flag()
    decor: Mapped[Optional[bool]] = _checklist_flag()
    catering: Mapped[Optional[bool]] = _checklist_flag()
    entertainment: Mapped[Optional[bool]] = _checklist_flag()
    photographer: Mapped[Optional[bool]] = _checklist_flag()
    wedding_cake: Mapped[Optional[bool]] = _checklist_flag()
    transportation: Mapped[Optional[bool]] = _checklist_flag()

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
    )

    def __repr__(self) -> str:
        return f"<WeddingPlan(id={self.id}, user_id={self.user_id}, budget={self.budget})>"
