"""
Wedding Planner Backend — Wedding Plan Service
================================================
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import NotFoundError, ValidationError
from wedding_planner.models import CHECKLIST_ITEMS
from wedding_planner.repositories import WeddingPlanRepository
from wedding_planner.schemas.wedding_plan import (
    WeddingPlanCreate,
    WeddingPlanCreatedResponse,
    WeddingPlanResponse,
)
from wedding_planner.services.common import is_missing, integrity_guard

logger = logging.getLogger(__name__)


class WeddingPlanService:
    """Business logic for wedding-plan checklists."""

    async def create_plan(self, db: AsyncSession, payload: WeddingPlanCreate) -> WeddingPlanCreatedResponse:
        """Create a checklist; unspecified flags are stored as false."""
        if is_missing(payload.user_id):
            raise ValidationError("user_id is required", field="user_id")

        checklist = {item: bool(getattr(payload, item)) for item in CHECKLIST_ITEMS}

        with integrity_guard(foreign_key_message="user_id must reference an existing user"):
            plan = await WeddingPlanRepository(db).create(
                user_id=payload.user_id,
                budget=payload.budget,
                checklist=checklist,
            )

        logger.info("Wedding plan %s created for user %s", plan.id, plan.user_id)
        return WeddingPlanCreatedResponse(plan=WeddingPlanResponse.model_validate(plan))

    async def plans_for_user(self, db: AsyncSession, user_id: int) -> List[WeddingPlanResponse]:
        plans = await WeddingPlanRepository(db).list_by_user(user_id)
        if not plans:
            raise NotFoundError(
                resource="wedding plan",
                message="No plans found for this user",
                context={"user_id": user_id},
            )
        return [WeddingPlanResponse.model_validate(plan) for plan in plans]


# ── Singleton Instance ────────────────────────────────────────────────────
wedding_plan_service = WeddingPlanService()
