"""Adoption request schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from petshelter.models.adoption_request import AdoptionStatus

from .common import BaseResponse, ListQuery, PaginationMeta

ADOPTION_REQUEST_ORDER_FIELDS = (
    "id",
    "user_id",
    "animal_id",
    "status",
    "requested_at",
    "responded_at",
    "completed_at",
)


class AdoptionRequestCreate(BaseModel):
    """Schema for filing an adoption request. The requester is the current user."""

    animal_id: str
    message: str | None = Field(None, max_length=2000)
    has_experience: bool | None = None
    has_other_pets: bool | None = None
    has_children: bool | None = None
    house_type: str | None = Field(None, max_length=50)


class AdoptionRequestUpdate(BaseModel):
    """Schema for updating an adoption request."""

    status: AdoptionStatus | None = None
    message: str | None = Field(None, max_length=2000)
    has_experience: bool | None = None
    has_other_pets: bool | None = None
    has_children: bool | None = None
    house_type: str | None = Field(None, max_length=50)
    feedback: str | None = None
    responded_at: datetime | None = None
    completed_at: datetime | None = None


class AdoptionRequestResponse(BaseModel):
    """Schema for adoption request response."""

    model_config = {"from_attributes": True}

    id: str
    user_id: str
    animal_id: str
    status: AdoptionStatus
    message: str | None
    has_experience: bool | None
    has_other_pets: bool | None
    has_children: bool | None
    house_type: str | None
    feedback: str | None
    requested_at: datetime
    responded_at: datetime | None
    completed_at: datetime | None


class AdoptionRequestFilters(ListQuery):
    """Filters for adoption request listing."""

    status: AdoptionStatus | None = None
    user_id: str | None = None
    animal_id: str | None = None


class AdoptionRequestDetailResponse(BaseResponse):
    adoption_request: AdoptionRequestResponse


class AdoptionRequestListResponse(BaseResponse):
    adoption_requests: list[AdoptionRequestResponse]
    pagination: PaginationMeta
