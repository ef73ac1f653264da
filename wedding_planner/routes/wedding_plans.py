"""
Wedding Planner Backend — Wedding Plan Routes
===============================================
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.common import ErrorResponse
from wedding_planner.schemas.wedding_plan import (
    WeddingPlanCreate,
    WeddingPlanCreatedResponse,
    WeddingPlanResponse,
)
from wedding_planner.services.wedding_plan_service import wedding_plan_service

router = APIRouter(prefix="/wedding_plans", tags=["Wedding Plans"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=WeddingPlanCreatedResponse,
    responses={400: {"description": "user_id is required", "model": ErrorResponse}},
    summary="Create a wedding-plan checklist",
)
async def create_wedding_plan(
    payload: WeddingPlanCreate,
    db: AsyncSession = Depends(get_db_session),
) -> WeddingPlanCreatedResponse:
    return await wedding_plan_service.create_plan(db, payload)


@router.get(
    "/{user_id}",
    response_model=List[WeddingPlanResponse],
    responses={404: {"description": "No plans found for this user", "model": ErrorResponse}},
    summary="List a user's wedding plans",
)
async def list_wedding_plans(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[WeddingPlanResponse]:
    return await wedding_plan_service.plans_for_user(db, user_id)
