"""
Wedding Planner Backend — Appointment Schemas
===============================================
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel


class AppointmentCreate(BaseModel):
    """POST /appointments body. date, time, client_id and vendor_id are required."""
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    additional_info: Optional[str] = None
    client_id: Optional[int] = None
    vendor_id: Optional[int] = None
    status: Optional[bool] = None


class AppointmentStatusUpdate(BaseModel):
    """PATCH /appointments/{id}/status body; `false` is a valid status."""
    status: Optional[bool] = None


class AppointmentResponse(BaseModel):
    id: int
    date: dt.date
    time: dt.time
    additional_info: Optional[str] = None
    client_id: int
    vendor_id: int
    status: Optional[bool] = None
    created_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}
