"""
Wedding Planner Backend — Booking Routes
==========================================

What:  Creating bookings and the client/vendor booking views.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingDetail,
    BookingResponse,
    BookingStatusUpdate,
    VendorServiceBookings,
)
from wedding_planner.schemas.common import ErrorResponse
from wedding_planner.services.booking_service import booking_service

router = APIRouter(tags=["Bookings"])


@router.post(
    "/addbooking",
    status_code=status.HTTP_201_CREATED,
    response_model=BookingCreatedResponse,
    responses={400: {"description": "Missing or unknown ids", "model": ErrorResponse}},
    summary="Book a subcategory of a service",
)
async def add_booking(
    payload: BookingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> BookingCreatedResponse:
    return await booking_service.create_booking(db, payload)


@router.get(
    "/bookings/{user_id}",
    response_model=List[BookingDetail],
    responses={404: {"description": "No bookings found for this user", "model": ErrorResponse}},
    summary="A user's bookings with service, subcategory and payment",
)
async def list_user_bookings(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[BookingDetail]:
    return await booking_service.bookings_for_user(db, user_id)


@router.patch(
    "/bookings/{booking_id}/status",
    response_model=BookingResponse,
    responses={
        400: {"description": "Missing or unknown status", "model": ErrorResponse},
        404: {"description": "Booking not found", "model": ErrorResponse},
    },
    summary="Move a booking to another status",
)
async def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> BookingResponse:
    return await booking_service.update_status(db, booking_id, payload)


@router.get(
    "/vendor_bookings/{user_id}",
    response_model=List[VendorServiceBookings],
    responses={404: {"description": "No services, or no bookings on them", "model": ErrorResponse}},
    summary="A vendor's booked services with bookings, subcategories and clients",
)
async def list_vendor_bookings(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[VendorServiceBookings]:
    return await booking_service.bookings_for_vendor(db, user_id)
