"""User schemas."""

from datetime import datetime

from pydantic import BaseModel

from .common import BaseResponse


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = {"from_attributes": True}

    id: str
    email: str
    name: str
    user_type: str | None
    is_active: bool
    created_at: datetime


class UserDetailResponse(BaseResponse):
    user: UserResponse
