"""
Wedding Planner Backend — User Routes
=======================================

What:  Registration, profile lookup and login.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedding_planner.database import get_db_session
from wedding_planner.schemas.common import ErrorResponse
from wedding_planner.schemas.user import LoginRequest, LoginResponse, UserCreate, UserResponse
from wedding_planner.services.user_service import user_service

router = APIRouter(tags=["Users"])


@router.post(
    "/adduser",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        400: {"description": "Missing required fields", "model": ErrorResponse},
        409: {"description": "Email already registered", "model": ErrorResponse},
    },
    summary="Register a client or vendor",
)
async def add_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.register(db, payload)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid user ID", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Get a user by ID",
)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing email or password", "model": ErrorResponse},
        401: {"description": "Invalid email or password", "model": ErrorResponse},
    },
    summary="Check credentials",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await user_service.login(db, payload.email, payload.password)
