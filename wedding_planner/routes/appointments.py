"""
Wedding Planner Backend — Appointment Routes
==============================================

What:  Scheduling and managing client/vendor meetings.

Route order matters: the /client/ and /vendor/ listings are registered
before the /{appointment_id} routes.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentStatusUpdate,
)
from wedding_planner.schemas.common import ErrorResponse, MessageResponse
from wedding_planner.services.appointment_service import appointment_service

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AppointmentResponse,
    responses={400: {"description": "Missing required fields", "model": ErrorResponse}},
    summary="Schedule an appointment",
)
async def create_appointment(
    payload: AppointmentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> AppointmentResponse:
    return await appointment_service.schedule(db, payload)


@router.get("", response_model=List[AppointmentResponse], summary="List all appointments")
async def list_appointments(db: AsyncSession = Depends(get_db_session)) -> List[AppointmentResponse]:
    return await appointment_service.list_all(db)


@router.get(
    "/client/{client_id}",
    response_model=List[AppointmentResponse],
    summary="List a client's appointments",
)
async def list_client_appointments(
    client_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[AppointmentResponse]:
    return await appointment_service.list_for_client(db, client_id)


@router.get(
    "/vendor/{vendor_id}",
    response_model=List[AppointmentResponse],
    summary="List a vendor's appointments",
)
async def list_vendor_appointments(
    vendor_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[AppointmentResponse]:
    return await appointment_service.list_for_vendor(db, vendor_id)


@router.patch(
    "/{appointment_id}/status",
    response_model=AppointmentResponse,
    responses={
        400: {"description": "Status is required", "model": ErrorResponse},
        404: {"description": "Appointment not found", "model": ErrorResponse},
    },
    summary="Update an appointment's status",
)
async def update_appointment_status(
    appointment_id: int,
    payload: AppointmentStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> AppointmentResponse:
    return await appointment_service.update_status(db, appointment_id, payload)


@router.delete(
    "/{appointment_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Appointment not found", "model": ErrorResponse}},
    summary="Delete an appointment",
)
async def delete_appointment(
    appointment_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await appointment_service.cancel(db, appointment_id)
