"""
Wedding Planner Backend — Catalog Service
===========================================

What:  Vendor services and their priced subcategories.
Who:   Called by the /addservice, /services and /services/{userId} handlers.

Create flow (POST /addservice):
    ┌───────────┐    ┌──────────────────┐    ┌───────────┐    ┌───────────────┐
    │ Required  │───▶│ Decode & check   │───▶│ INSERT    │───▶│ INSERT all    │
    │ fields    │    │ subcategories    │    │ service   │    │ subcategories │
    └───────────┘    └──────────────────┘    └───────────┘    └───────────────┘

    Both inserts run inside the request's transaction, so a failing
    subcategory row leaves no service behind.

Listing:
    Services are loaded first, then every subcategory for them in a single
    IN query, grouped back onto their service.
"""

import json
import logging
from typing import Any, List, Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.exceptions import NotFoundError, ValidationError
from wedding_planner.models import Service
from wedding_planner.repositories import ServiceRepository
from wedding_planner.schemas.common import MessageResponse
from wedding_planner.schemas.service import (
    ServiceCreate,
    ServiceCreatedResponse,
    ServiceResponse,
    ServiceWithSubcategories,
    SubcategoryIn,
    SubcategoryResponse,
)
from wedding_planner.services.common import any_missing

logger = logging.getLogger(__name__)

_subcategory_list = TypeAdapter(List[SubcategoryIn])


class CatalogService:
    """Business logic for the service catalog."""

    async def create_service(self, db: AsyncSession, payload: ServiceCreate) -> ServiceCreatedResponse:
        """
        Create a service and its subcategories.

        Raises:
            ValidationError: missing fields or malformed subcategories
        """
        if any_missing(payload.title, payload.description, payload.userId, payload.subcategories):
            raise ValidationError("Missing required fields")

        items = self.parse_subcategories(payload.subcategories)

        repo = ServiceRepository(db)
        service = await repo.create(
            title=payload.title,
            description=payload.description,
            user_id=payload.userId,
        )
        await repo.add_subcategories(service.id, [item.to_row() for item in items])

        logger.info(
            "Service %s created for vendor %s with %d subcategories",
            service.id, service.user_id, len(items),
        )
        return ServiceCreatedResponse(serviceId=service.id)

    @staticmethod
    def parse_subcategories(raw: Any) -> List[SubcategoryIn]:
        """
        Decode the `subcategories` field.

        Accepts a JSON-encoded array string or an already-decoded list.

        Raises:
            ValidationError: undecodable JSON, not an array, or a bad item
        """
        decoded = raw
        if isinstance(raw, str):
            try:
                decoded = json.loads(raw)
            except ValueError:
                raise ValidationError("Invalid subcategories format", field="subcategories")

        if not isinstance(decoded, list):
            raise ValidationError("Subcategories must be an array", field="subcategories")

        try:
            return _subcategory_list.validate_python(decoded)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid subcategories format",
                field="subcategories",
                context={"error_count": e.error_count()},
            )

    async def list_services(self, db: AsyncSession) -> List[ServiceWithSubcategories]:
        repo = ServiceRepository(db)
        return await self._with_subcategories(repo, await repo.list_all())

    async def list_vendor_services(self, db: AsyncSession, user_id: int) -> List[ServiceWithSubcategories]:
        repo = ServiceRepository(db)
        return await self._with_subcategories(repo, await repo.list_by_owner(user_id))

    async def delete_service(self, db: AsyncSession, service_id: int) -> MessageResponse:
        """Remove a service; its subcategories and bookings cascade."""
        deleted = await ServiceRepository(db).delete(service_id)
        if deleted is None:
            raise NotFoundError(resource="service", resource_id=service_id)
        logger.info("Service %s deleted", service_id)
        return MessageResponse(message="Service deleted successfully")

    @staticmethod
    async def _with_subcategories(
        repo: ServiceRepository,
        services: Sequence[Service],
    ) -> List[ServiceWithSubcategories]:
        grouped = await repo.subcategories_for(service.id for service in services)
        return [
            ServiceWithSubcategories(
                **ServiceResponse.model_validate(service).model_dump(),
                subcategories=[
                    SubcategoryResponse.model_validate(sub) for sub in grouped.get(service.id, [])
                ],
            )
            for service in services
        ]


# ── Singleton Instance ────────────────────────────────────────────────────
catalog_service = CatalogService()
