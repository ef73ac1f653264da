"""
repositories/appointment_repo.py
--------------------------------
Data access layer for appointments.
"""

import datetime as dt
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import Appointment


class AppointmentRepository:
    """Repository for CRUD operations on the appointments table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        date: dt.date,
        time: dt.time,
        client_id: int,
        vendor_id: int,
        additional_info: Optional[str] = None,
        status: Optional[bool] = None,
    ) -> Appointment:
        result = await self.session.execute(
            insert(Appointment)
            .values(
                date=date,
                time=time,
                additional_info=additional_info,
                client_id=client_id,
                vendor_id=vendor_id,
                status=status,
            )
            .returning(Appointment)
        )
        return result.scalar_one()

    async def list_all(self) -> List[Appointment]:
        result = await self.session.execute(select(Appointment).order_by(Appointment.id))
        return list(result.scalars().all())

    async def list_by_client(self, client_id: int) -> List[Appointment]:
        result = await self.session.execute(
            select(Appointment).where(Appointment.client_id == client_id).order_by(Appointment.id)
        )
        return list(result.scalars().all())

    async def list_by_vendor(self, vendor_id: int) -> List[Appointment]:
        result = await self.session.execute(
            select(Appointment).where(Appointment.vendor_id == vendor_id).order_by(Appointment.id)
        )
        return list(result.scalars().all())

    async def update_status(self, appointment_id: int, status: bool) -> Optional[Appointment]:
        """Set the status flag; returns the updated row or None if absent."""
        result = await self.session.execute(
            update(Appointment)
            .where(Appointment.id == appointment_id)
            .values(status=status)
            .returning(Appointment)
            .execution_options(synchronize_session="fetch")
        )
        return result.scalar_one_or_none()

    async def delete(self, appointment_id: int) -> Optional[int]:
        result = await self.session.execute(
            delete(Appointment)
            .where(Appointment.id == appointment_id)
            .returning(Appointment.id)
        )
        return result.scalar_one_or_none()
