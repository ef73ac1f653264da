"""
ORM models, one module per entity.

Importing this package registers every table on `Base.metadata`, which the
schema initializer and Alembic both read.
"""

from wedding_planner.models.user import User
from wedding_planner.models.service import Service, Subcategory
from wedding_planner.models.appointment import Appointment
from wedding_planner.models.booking import Booking, BookingStatus
from wedding_planner.models.payment import Payment
from wedding_planner.models.wedding_plan import CHECKLIST_ITEMS, WeddingPlan

__all__ = [
    "User",
    "Service",
    "Subcategory",
    "Appointment",
    "Booking",
    "BookingStatus",
    "Payment",
    "WeddingPlan",
    "CHECKLIST_ITEMS",
]
