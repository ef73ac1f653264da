"""
Wedding Planner Backend — Booking & Payment Schemas
=====================================================

What:  Request bodies for bookings and deposits, plus the two enriched
       booking views:

    GET /bookings/{user_id}        → [BookingDetail]
        booking row + service + subcategory + first payment (each nullable)

    GET /vendor_bookings/{userId}  → [VendorServiceBookings]
        service row + bookings[], each booking + subcategory + user (nullable)
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from wedding_planner.models.booking import BookingStatus
from wedding_planner.schemas.service import ServiceResponse, SubcategoryResponse
from wedding_planner.schemas.user import UserResponse


class BookingCreate(BaseModel):
    """POST /addbooking body; all three ids are required."""
    service_id: Optional[int] = None
    user_id: Optional[int] = None
    sub_id: Optional[int] = None


class BookingStatusUpdate(BaseModel):
    status: Optional[str] = Field(
        default=None,
        description="One of: 'in progress', 'confirmed', 'completed'",
    )


class PaymentCreate(BaseModel):
    """POST /payments body; all three fields are required."""
    booking_id: Optional[int] = None
    deposit: Optional[Decimal] = None
    reference_number: Optional[str] = None


class PaymentResponse(BaseModel):
    id: int
    booking_id: Optional[int] = None
    deposit: Decimal
    reference_number: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BookingResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    service_id: Optional[int] = None
    sub_id: Optional[int] = None
    status: Optional[BookingStatus] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BookingCreatedResponse(BaseModel):
    message: str = "Booking added successfully"
    booking: BookingResponse


class BookingDetail(BookingResponse):
    service: Optional[ServiceResponse] = None
    subcategory: Optional[SubcategoryResponse] = None
    payment: Optional[PaymentResponse] = None


class VendorBooking(BookingResponse):
    subcategory: Optional[SubcategoryResponse] = None
    user: Optional[UserResponse] = None


class VendorServiceBookings(ServiceResponse):
    bookings: List[VendorBooking] = Field(default_factory=list)
