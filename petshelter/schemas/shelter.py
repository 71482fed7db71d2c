"""Shelter schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, validator

from .common import BaseResponse, ListQuery, PaginationMeta

SHELTER_ORDER_FIELDS = (
    "id",
    "name",
    "email",
    "phone",
    "city",
    "state",
    "zip_code",
    "created_at",
    "updated_at",
)


class ShelterCreate(BaseModel):
    """Schema for creating a shelter."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=20)
    cnpj: str | None = Field(None, max_length=18)
    description: str | None = None
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=2, max_length=2, description="Two-letter state code")
    zip_code: str = Field(..., min_length=1, max_length=10)
    website: str | None = Field(None, max_length=255)

    @validator("state")
    def normalize_state(cls, v):
        return v.upper()


class ShelterUpdate(BaseModel):
    """Schema for updating a shelter."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=1, max_length=20)
    cnpj: str | None = Field(None, max_length=18)
    description: str | None = None
    address: str | None = Field(None, min_length=1)
    city: str | None = Field(None, min_length=1, max_length=100)
    state: str | None = Field(None, min_length=2, max_length=2)
    zip_code: str | None = Field(None, min_length=1, max_length=10)
    website: str | None = Field(None, max_length=255)

    @validator("state")
    def normalize_state(cls, v):
        return v.upper() if v else v


class ShelterResponse(BaseModel):
    """Schema for shelter response."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    email: str
    phone: str
    cnpj: str | None
    description: str | None
    address: str
    city: str
    state: str
    zip_code: str
    website: str | None
    created_at: datetime
    updated_at: datetime


class ShelterFilters(ListQuery):
    city: str | None = None
    state: str | None = None


class ShelterManagerAdd(BaseModel):
    user_id: str


class ShelterDetailResponse(BaseResponse):
    shelter: ShelterResponse


class ShelterListResponse(BaseResponse):
    shelters: list[ShelterResponse]
    pagination: PaginationMeta


class ShelterManagersResponse(BaseResponse):
    shelter_id: str
    user_ids: list[str]
