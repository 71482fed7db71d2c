"""Animal schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from petshelter.models.animal import AnimalGender, AnimalSize, AnimalType

from .common import BaseResponse, ListQuery, PaginationMeta

ANIMAL_ORDER_FIELDS = (
    "id",
    "name",
    "type",
    "breed",
    "age",
    "size",
    "gender",
    "is_adopted",
    "created_at",
    "updated_at",
)


class AnimalCreate(BaseModel):
    """Schema for creating an animal."""

    shelter_id: str | None = Field(None, description="Owning shelter, for shelter animals")
    name: str = Field(..., min_length=1, max_length=255)
    type: AnimalType
    breed: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=0, description="Age in months")
    size: AnimalSize
    gender: AnimalGender
    color: str | None = Field(None, max_length=100)
    description: str | None = None
    health_info: str | None = None
    adoption_reason: str | None = None
    is_adopted: bool = False
    image_url: str | None = Field(None, max_length=500)


class AnimalUpdate(BaseModel):
    """Schema for updating an animal. Ownership fields are not editable."""

    name: str | None = Field(None, min_length=1, max_length=255)
    type: AnimalType | None = None
    breed: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=0)
    size: AnimalSize | None = None
    gender: AnimalGender | None = None
    color: str | None = Field(None, max_length=100)
    description: str | None = None
    health_info: str | None = None
    adoption_reason: str | None = None
    is_adopted: bool | None = None
    image_url: str | None = Field(None, max_length=500)


class AnimalResponse(BaseModel):
    """Schema for animal response."""

    model_config = {"from_attributes": True}

    id: str
    shelter_id: str | None
    user_id: str | None
    name: str
    type: AnimalType
    breed: str | None
    age: int | None
    size: AnimalSize
    gender: AnimalGender
    color: str | None
    description: str | None
    health_info: str | None
    adoption_reason: str | None
    is_adopted: bool
    image_url: str | None
    created_at: datetime
    updated_at: datetime


class AnimalFilters(ListQuery):
    """Filters for the full animal listing."""

    type: AnimalType | None = None
    size: AnimalSize | None = None
    gender: AnimalGender | None = None
    is_adopted: bool | None = None
    shelter_id: str | None = None
    user_id: str | None = None


class AnimalDetailResponse(BaseResponse):
    animal: AnimalResponse


class AnimalListResponse(BaseResponse):
    animals: list[AnimalResponse]
    pagination: PaginationMeta


class PublicAnimalFilters(ListQuery):
    """Filters for the public catalogue; adoption state and ownership are fixed server-side."""

    type: AnimalType | None = None
    size: AnimalSize | None = None
    gender: AnimalGender | None = None
