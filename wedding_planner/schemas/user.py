"""
Wedding Planner Backend — User Schemas
========================================

What:  Request bodies for registration and login, and the user row returned
       by /adduser, /users/{id} and /login.

Note on `password`:
    The stored bcrypt hash is part of the user row clients already consume,
    so UserResponse carries it. The plain password only ever appears in
    request bodies.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """POST /adduser body. email, full_name and password are required."""
    email: Optional[str] = None
    full_name: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = Field(default=None, description="'client' (default) or 'vendor'")


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    email: str
    full_name: str
    contact_number: Optional[str] = None
    address: Optional[str] = None
    password: str = Field(description="bcrypt hash of the password")
    role: Optional[str] = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserResponse
