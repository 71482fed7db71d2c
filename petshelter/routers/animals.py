"""Animal routes."""

from fastapi import APIRouter, Depends, status

from petshelter.dependencies.auth import get_current_active_user
from petshelter.dependencies.permissions import get_permission_checker, require_permission
from petshelter.dependencies.services import get_animal_service
from petshelter.models.user import User
from petshelter.permissions import Action, AnimalData, PermissionChecker, ResourceType, require
from petshelter.schemas.animal import (
    AnimalCreate,
    AnimalDetailResponse,
    AnimalFilters,
    AnimalListResponse,
    AnimalResponse,
    AnimalUpdate,
    PublicAnimalFilters,
)
from petshelter.schemas.common import BaseResponse, ListQuery, PaginationMeta
from petshelter.services.animal_service import AnimalService

from .common import get_or_404, log_operation

router = APIRouter()

LIST_QUERY_FIELDS = set(ListQuery.model_fields)


def _list_response(animals: list, query: ListQuery) -> AnimalListResponse:
    return AnimalListResponse(
        success=True,
        animals=[AnimalResponse.model_validate(animal) for animal in animals],
        pagination=PaginationMeta(page=query.page, page_size=query.page_size, count=len(animals)),
    )


@router.get("/", response_model=AnimalListResponse)
async def list_animals(
    filters: AnimalFilters = Depends(),
    animal_service: AnimalService = Depends(get_animal_service),
):
    """List animals with every filter available."""
    animals = await animal_service.get_all(filters, filters.model_dump(exclude=LIST_QUERY_FIELDS))
    return _list_response(animals, filters)


@router.get("/public", response_model=AnimalListResponse)
async def list_public_animals(
    filters: PublicAnimalFilters = Depends(),
    animal_service: AnimalService = Depends(get_animal_service),
):
    """Public catalogue: animals still waiting for adoption."""
    animals = await animal_service.get_all(
        filters,
        {**filters.model_dump(exclude=LIST_QUERY_FIELDS), "is_adopted": False},
    )
    return _list_response(animals, filters)


@router.get("/{animal_id}", response_model=AnimalDetailResponse)
async def get_animal(
    animal_id: str,
    animal_service: AnimalService = Depends(get_animal_service),
):
    animal = await get_or_404(animal_service, animal_id, "Animal")
    return AnimalDetailResponse(success=True, animal=AnimalResponse.model_validate(animal))


@router.post("/", response_model=AnimalDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    animal_data: AnimalCreate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(require_permission(ResourceType.ANIMALS, Action.CREATE)),
    animal_service: AnimalService = Depends(get_animal_service),
):
    """
    Create an animal.

    Shelter animals belong to their shelter and need update rights on it;
    every other animal is put up for adoption by the current user.
    """
    data = animal_data.model_dump()
    if animal_data.shelter_id:
        require(checker, ResourceType.ANIMALS, Action.UPDATE, AnimalData(id=None, shelter_id=animal_data.shelter_id))
        data["user_id"] = None
    else:
        data["user_id"] = current_user.id

    animal = await animal_service.create(**data)
    log_operation("create", ResourceType.ANIMALS.value, current_user.id, animal_id=animal.id)

    return AnimalDetailResponse(
        success=True,
        message="Animal created successfully",
        animal=AnimalResponse.model_validate(animal),
    )


@router.patch("/{animal_id}", response_model=AnimalDetailResponse)
async def update_animal(
    animal_id: str,
    animal_data: AnimalUpdate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    animal_service: AnimalService = Depends(get_animal_service),
):
    animal = await get_or_404(animal_service, animal_id, "Animal")
    require(checker, ResourceType.ANIMALS, Action.UPDATE, animal.to_permission_data())

    animal = await animal_service.update(animal, animal_data.model_dump(exclude_unset=True))
    log_operation("update", ResourceType.ANIMALS.value, current_user.id, animal_id=animal.id)

    return AnimalDetailResponse(
        success=True,
        message="Animal updated successfully",
        animal=AnimalResponse.model_validate(animal),
    )


@router.delete("/{animal_id}", response_model=BaseResponse)
async def delete_animal(
    animal_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    animal_service: AnimalService = Depends(get_animal_service),
):
    animal = await get_or_404(animal_service, animal_id, "Animal")
    require(checker, ResourceType.ANIMALS, Action.DELETE, animal.to_permission_data())

    await animal_service.delete(animal)
    log_operation("delete", ResourceType.ANIMALS.value, current_user.id, animal_id=animal_id)

    return BaseResponse(success=True, message="Animal deleted successfully")
