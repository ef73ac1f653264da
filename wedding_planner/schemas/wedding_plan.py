"""
Wedding Planner Backend — Wedding Plan Schemas
================================================
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class WeddingPlanCreate(BaseModel):
    """POST /wedding_plans body. Only user_id is required; flags default to false."""
    user_id: Optional[int] = None
    budget: Optional[Decimal] = None
    venue: Optional[bool] = None
    decor: Optional[bool] = None
    catering: Optional[bool] = None
    entertainment: Optional[bool] = None
    photographer: Optional[bool] = None
    wedding_cake: Optional[bool] = None
    transportation: Optional[bool] = None


class WeddingPlanResponse(BaseModel):
    id: int
    budget: Optional[Decimal] = None
    venue: Optional[bool] = False
    decor: Optional[bool] = False
    catering: Optional[bool] = False
    entertainment: Optional[bool] = False
    photographer: Optional[bool] = False
    wedding_cake: Optional[bool] = False
    transportation: Optional[bool] = False
    created_at: Optional[datetime] = None
    user_id: Optional[int] = None

    model_config = {"from_attributes": True}


class WeddingPlanCreatedResponse(BaseModel):
    message: str = "Wedding plan created successfully"
    plan: WeddingPlanResponse
