"""Authentication schemas."""

from typing import Any

from pydantic import BaseModel, EmailStr, Field, validator

from petshelter.permissions.templates import SELF_SERVICE_ROLES
from petshelter.utils.security import is_strong_password

from .common import BaseResponse
from .user import UserResponse

SELF_SERVICE_ROLE_VALUES = sorted(role.value for role in SELF_SERVICE_ROLES)


class RegisterRequest(BaseModel):
    """Schema for self-service registration."""

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=8, max_length=72, description="Password")
    user_type: str = Field(default="adopter", description="Role: adopter, donor or both")

    @validator("password")
    def validate_password_strength(cls, v):
        if not is_strong_password(v):
            raise ValueError("Password must contain upper and lower case letters and a digit")
        return v

    @validator("user_type")
    def validate_user_type(cls, v):
        if v not in SELF_SERVICE_ROLE_VALUES:
            raise ValueError(f"user_type must be one of: {SELF_SERVICE_ROLE_VALUES}")
        return v


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class TokenResponse(BaseModel):
    """Bearer token issued at login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Token lifetime in seconds")


class LoginResponse(BaseResponse):
    """Schema for login response."""

    user: UserResponse
    tokens: TokenResponse


class MeResponse(BaseResponse):
    """Current user with the resolved permission table."""

    user: UserResponse
    role: str | None = None
    permissions: dict[str, dict[str, Any]] | None = None
