"""
Wedding Planner Backend — Service Catalog Schemas
===================================================

What:  Request body for POST /addservice and the service/subcategory shapes
       returned by the catalog endpoints.

Subcategory payload:
    Clients send `subcategories` as a JSON-encoded array string (the form
    builder serializes it), with camelCase item keys:

        '[{"name": "Gold", "price": 1200, "shortDescription": "Full day", "file": null}]'

    SubcategoryIn maps those keys onto the table columns.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubcategoryIn(BaseModel):
    """One decoded item of the `subcategories` array."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    price: Decimal
    short_description: str = Field(alias="shortDescription")
    file_url: Optional[str] = Field(default=None, alias="file")

    def to_row(self) -> dict:
        return {
            "name": self.name,
            "price": self.price,
            "short_description": self.short_description,
            "file_url": self.file_url,
        }


class ServiceCreate(BaseModel):
    """
    POST /addservice body.

    `subcategories` is left untyped here; the catalog service decodes and
    validates it so malformed input gets its own messages.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    userId: Optional[int] = None
    subcategories: Any = None


class SubcategoryResponse(BaseModel):
    id: int
    service_id: Optional[int] = None
    name: str
    price: Decimal
    short_description: str
    file_url: Optional[str] = None

    model_config = {"from_attributes": True}


class ServiceResponse(BaseModel):
    id: int
    title: str
    description: str
    user_id: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ServiceWithSubcategories(ServiceResponse):
    """A service with its line items nested, as listed by GET /services."""
    subcategories: List[SubcategoryResponse] = Field(default_factory=list)


class ServiceCreatedResponse(BaseModel):
    message: str = "Service and subcategories added successfully"
    serviceId: int
