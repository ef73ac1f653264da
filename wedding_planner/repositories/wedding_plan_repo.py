"""
repositories/wedding_plan_repo.py
---------------------------------
Data access layer for wedding plans.
"""

from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import WeddingPlan


class WeddingPlanRepository:
    """Repository for the wedding_plans table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        user_id: int,
        budget: Optional[Decimal],
        checklist: Dict[str, bool],
    ) -> WeddingPlan:
        """
        Insert a plan.

        Args:
            user_id: Owner of the plan
            budget: Optional budget amount
            checklist: Flag name → value for every checklist column
        """
        result = await self.session.execute(
            insert(WeddingPlan)
            .values(user_id=user_id, budget=budget, **checklist)
            .returning(WeddingPlan)
        )
        return result.scalar_one()

    async def list_by_user(self, user_id: int) -> List[WeddingPlan]:
        result = await self.session.execute(
            select(WeddingPlan).where(WeddingPlan.user_id == user_id).order_by(WeddingPlan.id)
        )
        return list(result.scalars().all())
