"""
Wedding Planner Backend — Appointment Service
===============================================

What:  Scheduling, listing, status updates and cancellation of client/vendor
       appointments.

Status:
    A nullable boolean. `false` is a legitimate value for updates; only an
    absent/null status is rejected.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import NotFoundError, ValidationError
from wedding_planner.repositories import AppointmentRepository
from wedding_planner.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentStatusUpdate,
)
from wedding_planner.schemas.common import MessageResponse
from wedding_planner.services.common import any_missing, integrity_guard

logger = logging.getLogger(__name__)


def _rows(appointments) -> List[AppointmentResponse]:
    return [AppointmentResponse.model_validate(a) for a in appointments]


class AppointmentService:
    """Business logic for appointments."""

    async def schedule(self, db: AsyncSession, payload: AppointmentCreate) -> AppointmentResponse:
        """
        Raises:
            ValidationError: a required field is missing, or client/vendor do not exist
        """
        if any_missing(payload.date, payload.time, payload.client_id, payload.vendor_id):
            raise ValidationError("date, time, client_id, and vendor_id are required")

        with integrity_guard(foreign_key_message="client_id and vendor_id must reference existing users"):
            appointment = await AppointmentRepository(db).create(
                date=payload.date,
                time=payload.time,
                client_id=payload.client_id,
                vendor_id=payload.vendor_id,
                additional_info=payload.additional_info,
                status=payload.status,
            )

        logger.info(
            "Appointment %s scheduled: client %s with vendor %s on %s",
            appointment.id, appointment.client_id, appointment.vendor_id, appointment.date,
        )
        return AppointmentResponse.model_validate(appointment)

    async def list_all(self, db: AsyncSession) -> List[AppointmentResponse]:
        return _rows(await AppointmentRepository(db).list_all())

    async def list_for_client(self, db: AsyncSession, client_id: int) -> List[AppointmentResponse]:
        return _rows(await AppointmentRepository(db).list_by_client(client_id))

    async def list_for_vendor(self, db: AsyncSession, vendor_id: int) -> List[AppointmentResponse]:
        return _rows(await AppointmentRepository(db).list_by_vendor(vendor_id))

    async def update_status(
        self,
        db: AsyncSession,
        appointment_id: int,
        payload: AppointmentStatusUpdate,
    ) -> AppointmentResponse:
        if payload.status is None:
            raise ValidationError("Status is required", field="status")

        appointment = await AppointmentRepository(db).update_status(appointment_id, payload.status)
        if appointment is None:
            raise NotFoundError(resource="appointment", resource_id=appointment_id)

        logger.info("Appointment %s status set to %s", appointment_id, payload.status)
        return AppointmentResponse.model_validate(appointment)

    async def cancel(self, db: AsyncSession, appointment_id: int) -> MessageResponse:
        deleted = await AppointmentRepository(db).delete(appointment_id)
        if deleted is None:
            raise NotFoundError(resource="appointment", resource_id=appointment_id)

        logger.info("Appointment %s deleted", appointment_id)
        return MessageResponse(message="Appointment deleted successfully")


# ── Singleton Instance ────────────────────────────────────────────────────
appointment_service = AppointmentService()
