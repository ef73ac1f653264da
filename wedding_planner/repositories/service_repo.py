"""
repositories/service_repo.py
----------------------------
Data access layer for services and their subcategories.

Subcategories are only ever reached through their service, so both tables
live behind this one repository.
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.models import Service, Subcategory


class ServiceRepository:
    """Repository for the services and subcategories tables."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ── Services ──────────────────────────────────────────────────────────

    async def create(self, title: str, description: str, user_id: int) -> Service:
        result = await self.session.execute(
            insert(Service)
            .values(title=title, description=description, user_id=user_id)
            .returning(Service)
        )
        return result.scalar_one()

    async def get(self, service_id: int) -> Optional[Service]:
        result = await self.session.execute(select(Service).where(Service.id == service_id))
        return result.scalar_one_or_none()

    async def get_many(self, service_ids: Iterable[int]) -> List[Service]:
        ids = list(service_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(Service).where(Service.id.in_(ids)).order_by(Service.id)
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[Service]:
        result = await self.session.execute(select(Service).order_by(Service.id))
        return list(result.scalars().all())

    async def list_by_owner(self, user_id: int) -> List[Service]:
        result = await self.session.execute(
            select(Service).where(Service.user_id == user_id).order_by(Service.id)
        )
        return list(result.scalars().all())

    async def list_ids_by_owner(self, user_id: int) -> List[int]:
        result = await self.session.execute(
            select(Service.id).where(Service.user_id == user_id).order_by(Service.id)
        )
        return list(result.scalars().all())

    async def delete(self, service_id: int) -> Optional[int]:
        """
        Delete a service. Subcategories and bookings go with it (ON DELETE CASCADE).

        Returns:
            The deleted id, or None when no such service exists.
        """
        result = await self.session.execute(
            delete(Service).where(Service.id == service_id).returning(Service.id)
        )
        return result.scalar_one_or_none()

    # ── Subcategories ─────────────────────────────────────────────────────

    async def add_subcategories(self, service_id: int, items: List[Dict]) -> List[Subcategory]:
        """
        Insert every subcategory for a service in one batched statement.

        Args:
            service_id: Parent service
            items: Dicts with name, price, short_description, file_url
        """
        if not items:
            return []
        rows = [{**item, "service_id": service_id} for item in items]
        result = await self.session.scalars(insert(Subcategory).returning(Subcategory), rows)
        return list(result.all())

    async def subcategories_for(self, service_ids: Iterable[int]) -> Dict[int, List[Subcategory]]:
        """Subcategories grouped by service id; every requested id gets a list."""
        ids = list(service_ids)
        grouped: Dict[int, List[Subcategory]] = {service_id: [] for service_id in ids}
        if not ids:
            return grouped
        result = await self.session.execute(
            select(Subcategory)
            .where(Subcategory.service_id.in_(ids))
            .order_by(Subcategory.id)
        )
        for subcategory in result.scalars().all():
            grouped[subcategory.service_id].append(subcategory)
        return grouped

    async def get_subcategory(self, sub_id: int) -> Optional[Subcategory]:
        result = await self.session.execute(select(Subcategory).where(Subcategory.id == sub_id))
        return result.scalar_one_or_none()

    async def get_subcategories(self, sub_ids: Iterable[int]) -> List[Subcategory]:
        ids = list(sub_ids)
        if not ids:
            return []
        result = await self.session.execute(select(Subcategory).where(Subcategory.id.in_(ids)))
        return list(result.scalars().all())
