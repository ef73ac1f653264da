"""
Wedding Planner Backend — Payment Routes
==========================================
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.booking import PaymentCreate, PaymentResponse
from wedding_planner.schemas.common import ErrorResponse
from wedding_planner.services.payment_service import payment_service

router = APIRouter(tags=["Payments"])


@router.post(
    "/payments",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentResponse,
    responses={400: {"description": "Missing fields or unknown booking", "model": ErrorResponse}},
    summary="Record a deposit for a booking",
)
async def create_payment(
    payload: PaymentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PaymentResponse:
    return await payment_service.record_deposit(db, payload)
