"""
Wedding Planner Backend — Service Catalog Routes
==================================================

What:  Vendors publish services with priced subcategories; anyone can list them.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.common import ErrorResponse, MessageResponse
from wedding_planner.schemas.service import (
    ServiceCreate,
    ServiceCreatedResponse,
    ServiceWithSubcategories,
)
from wedding_planner.services.catalog_service import catalog_service

router = APIRouter(tags=["Services"])


@router.post(
    "/addservice",
    status_code=status.HTTP_201_CREATED,
    response_model=ServiceCreatedResponse,
    responses={400: {"description": "Missing fields or malformed subcategories", "model": ErrorResponse}},
    summary="Create a service with its subcategories",
)
async def add_service(
    payload: ServiceCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ServiceCreatedResponse:
    return await catalog_service.create_service(db, payload)


@router.get(
    "/services",
    response_model=List[ServiceWithSubcategories],
    summary="List every service with nested subcategories",
)
async def list_services(db: AsyncSession = Depends(get_db_session)) -> List[ServiceWithSubcategories]:
    return await catalog_service.list_services(db)


@router.get(
    "/services/{user_id}",
    response_model=List[ServiceWithSubcategories],
    summary="List the services owned by a vendor",
)
async def list_vendor_services(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ServiceWithSubcategories]:
    return await catalog_service.list_vendor_services(db, user_id)


@router.delete(
    "/services/{service_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Service not found", "model": ErrorResponse}},
    summary="Delete a service (subcategories and bookings cascade)",
)
async def delete_service(
    service_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await catalog_service.delete_service(db, service_id)
