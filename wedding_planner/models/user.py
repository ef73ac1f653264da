"""
Wedding Planner Backend — User SQLAlchemy Model
=================================================

What:  ORM model for the `users` table, the root entity that services,
       appointments, bookings and wedding plans point at.
How:   Column names and types match the table existing installations
       already hold; `role` is a free-form VARCHAR defaulting to 'client'.

Lifecycle:
    Created by POST /adduser with the password already bcrypt-hashed.
    Never updated or deleted by the API.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from wedding_planner.database import Base

ROLE_CLIENT = "client"
ROLE_VENDOR = "vendor"
ROLES = (ROLE_CLIENT, ROLE_VENDOR)


class User(Base):
    """A registered client or vendor."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # UNIQUE: one account per email; duplicates surface as IntegrityError
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # bcrypt hash, never the plain password
    password: Mapped[str] = mapped_column(Text, nullable=False)

    role: Mapped[Optional[str]] = mapped_column(
        String(50),
        default=ROLE_CLIENT,
        server_default=text("'client'"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
