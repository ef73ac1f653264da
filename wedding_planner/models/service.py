"""
Wedding Planner Backend — Service & Subcategory Models
========================================================

What:  ORM models for `services` (a vendor's offering) and `subcategories`
       (the priced line items under a service).

Table notes:
    - services.user_id is a plain INTEGER with no foreign key: the owning
      vendor can be removed without touching the service row.
    - subcategories.service_id cascades, so deleting a service removes its
      line items (and, through bookings.sub_id, the bookings on them).
    - price is NUMERIC(10, 2); it reaches clients as a decimal string.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base


class Service(Base):
    """A vendor-published service (e.g. "Catering")."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, title='{self.title}', user_id={self.user_id})>"


class Subcategory(Base):
    """A priced line item offered under a service."""

    __tablename__ = "subcategories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    service_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("services.id", ondelete="CASCADE"),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    short_description: Mapped[str] = mapped_column(Text, nullable=False)
    file_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Subcategory(id={self.id}, service_id={self.service_id}, name='{self.name}')>"
