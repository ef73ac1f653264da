"""
Repositories - Data Access Layer
================================
One class per entity. Each wraps a request-scoped AsyncSession and exposes
typed CRUD methods so services never build SQL themselves.
"""

from wedding_planner.repositories.user_repo import UserRepository
from wedding_planner.repositories.service_repo import ServiceRepository
from wedding_planner.repositories.appointment_repo import AppointmentRepository
from wedding_planner.repositories.booking_repo import BookingRepository
from wedding_planner.repositories.payment_repo import PaymentRepository
from wedding_planner.repositories.wedding_plan_repo import WeddingPlanRepository

__all__ = [
    "UserRepository",
    "ServiceRepository",
    "AppointmentRepository",
    "BookingRepository",
    "PaymentRepository",
    "WeddingPlanRepository",
]
