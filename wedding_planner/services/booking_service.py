"""
Wedding Planner Backend — Booking Service
===========================================

What:  Creating bookings, changing their status, and the two read-side views
       that stitch bookings together with related rows.
Who:   Called by /addbooking, /bookings/{user_id}, /vendor_bookings/{userId}
       and PATCH /bookings/{id}/status.

Client view (GET /bookings/{user_id}):
    For each of the user's bookings, in id order, look up its service, its
    subcategory and its first payment one after another. A missing row never
    fails the request: a missing service nulls all three fields, a missing
    subcategory or payment nulls just that field.

Vendor view (GET /vendor_bookings/{userId}):
    1. ids of the vendor's services               → 404 if none
    2. distinct ids among them that have bookings  → 404 if none
    3. rows for those services
    4. every booking on those services
    5. the distinct subcategories and users the bookings point at
    Then nest: service → bookings → (subcategory, user).
"""

import logging
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import NotFoundError, ValidationError
from wedding_planner.models import BookingStatus
from wedding_planner.repositories import (
    BookingRepository,
    PaymentRepository,
    ServiceRepository,
    UserRepository,
)
from wedding_planner.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingDetail,
    BookingResponse,
    BookingStatusUpdate,
    PaymentResponse,
    VendorBooking,
    VendorServiceBookings,
)
from wedding_planner.schemas.service import ServiceResponse, SubcategoryResponse
from wedding_planner.schemas.user import UserResponse
from wedding_planner.services.common import any_missing, integrity_guard

logger = logging.getLogger(__name__)

_STATUS_VALUES = [status.value for status in BookingStatus]


class BookingService:
    """Business logic for bookings."""

    async def create_booking(self, db: AsyncSession, payload: BookingCreate) -> BookingCreatedResponse:
        """
        Raises:
            ValidationError: an id is missing or references a row that does not exist
        """
        if any_missing(payload.service_id, payload.user_id, payload.sub_id):
            raise ValidationError("Missing required fields")

        with integrity_guard(
            foreign_key_message="service_id, user_id and sub_id must reference existing records",
        ):
            booking = await BookingRepository(db).create(
                service_id=payload.service_id,
                user_id=payload.user_id,
                sub_id=payload.sub_id,
            )

        logger.info(
            "Booking %s created: user %s, service %s, subcategory %s",
            booking.id, booking.user_id, booking.service_id, booking.sub_id,
        )
        return BookingCreatedResponse(booking=BookingResponse.model_validate(booking))

    async def update_status(
        self,
        db: AsyncSession,
        booking_id: int,
        payload: BookingStatusUpdate,
    ) -> BookingResponse:
        if any_missing(payload.status):
            raise ValidationError("Status is required", field="status")
        try:
            status = BookingStatus(payload.status)
        except ValueError:
            raise ValidationError(
                f"Status must be one of: {', '.join(_STATUS_VALUES)}",
                field="status",
            )

        booking = await BookingRepository(db).update_status(booking_id, status)
        if booking is None:
            raise NotFoundError(resource="booking", resource_id=booking_id)

        logger.info("Booking %s status set to '%s'", booking_id, status.value)
        return BookingResponse.model_validate(booking)

    async def bookings_for_user(self, db: AsyncSession, user_id: int) -> List[BookingDetail]:
        """
        A user's bookings, each with its service, subcategory and payment.

        Raises:
            NotFoundError: the user has no bookings
        """
        bookings = await BookingRepository(db).list_by_user(user_id)
        if not bookings:
            logger.warning("No bookings found for user_id: %s", user_id)
            raise NotFoundError(
                resource="booking",
                message="No bookings found for this user",
                context={"user_id": user_id},
            )

        services = ServiceRepository(db)
        payments = PaymentRepository(db)
        details: List[BookingDetail] = []

        for booking in bookings:
            row = BookingResponse.model_validate(booking).model_dump()

            service = await services.get(booking.service_id) if booking.service_id is not None else None
            if service is None:
                logger.warning("Service not found for service_id: %s", booking.service_id)
                details.append(BookingDetail(**row))
                continue

            subcategory = await services.get_subcategory(booking.sub_id) if booking.sub_id is not None else None
            if subcategory is None:
                logger.warning("Subcategory not found for sub_id: %s", booking.sub_id)

            payment = await payments.first_for_booking(booking.id)
            if payment is None:
                logger.warning("No payment found for booking_id: %s", booking.id)

            details.append(
                BookingDetail(
                    **row,
                    service=ServiceResponse.model_validate(service),
                    subcategory=SubcategoryResponse.model_validate(subcategory) if subcategory else None,
                    payment=PaymentResponse.model_validate(payment) if payment else None,
                )
            )

        return details

    async def bookings_for_vendor(self, db: AsyncSession, user_id: int) -> List[VendorServiceBookings]:
        """
        A vendor's booked services with their bookings, subcategories and clients.

        Raises:
            NotFoundError: the vendor has no services, or none of them is booked
        """
        services = ServiceRepository(db)
        bookings_repo = BookingRepository(db)

        # Step 1: the vendor's services
        service_ids = await services.list_ids_by_owner(user_id)
        if not service_ids:
            raise NotFoundError(
                resource="service",
                message="No services found for the given userId",
                context={"user_id": user_id},
            )

        # Step 2: which of them have bookings
        booked_service_ids = await bookings_repo.booked_service_ids(service_ids)
        if not booked_service_ids:
            raise NotFoundError(
                resource="booking",
                message="No bookings found for the services of the given userId",
                context={"user_id": user_id},
            )

        # Step 3 and 4: service rows and all their bookings
        booked_services = await services.get_many(booked_service_ids)
        bookings = await bookings_repo.list_by_services(booked_service_ids)

        # Step 5: related subcategories and users, each fetched once
        sub_ids = list(dict.fromkeys(b.sub_id for b in bookings if b.sub_id is not None))
        user_ids = list(dict.fromkeys(b.user_id for b in bookings if b.user_id is not None))
        subcategories = {sub.id: sub for sub in await services.get_subcategories(sub_ids)}
        users = {user.id: user for user in await UserRepository(db).get_many(user_ids)}

        by_service: Dict[int, List[VendorBooking]] = {service_id: [] for service_id in booked_service_ids}
        for booking in bookings:
            subcategory = subcategories.get(booking.sub_id)
            user = users.get(booking.user_id)
            by_service[booking.service_id].append(
                VendorBooking(
                    **BookingResponse.model_validate(booking).model_dump(),
                    subcategory=SubcategoryResponse.model_validate(subcategory) if subcategory else None,
                    user=UserResponse.model_validate(user) if user else None,
                )
            )

        return [
            VendorServiceBookings(
                **ServiceResponse.model_validate(service).model_dump(),
                bookings=by_service.get(service.id, []),
            )
            for service in booked_services
        ]


# ── Singleton Instance ────────────────────────────────────────────────────
booking_service = BookingService()
