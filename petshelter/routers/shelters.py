"""Shelter routes, including shelter manager assignments."""

from fastapi import APIRouter, Depends, status

from petshelter.dependencies.auth import get_current_active_user
from petshelter.dependencies.permissions import get_permission_checker, require_permission
from petshelter.dependencies.services import (
    get_shelter_manager_service,
    get_shelter_service,
    get_user_service,
)
from petshelter.models.user import User
from petshelter.permissions import Action, PermissionChecker, ResourceType, require
from petshelter.schemas.common import BaseResponse, ListQuery, PaginationMeta
from petshelter.schemas.shelter import (
    ShelterCreate,
    ShelterDetailResponse,
    ShelterFilters,
    ShelterListResponse,
    ShelterManagerAdd,
    ShelterManagersResponse,
    ShelterResponse,
    ShelterUpdate,
)
from petshelter.services.shelter_manager_service import ShelterManagerService
from petshelter.services.shelter_service import ShelterService
from petshelter.services.user_service import UserService
from petshelter.utils.exceptions import ConflictError, NotFoundError

from .common import get_or_404, log_operation

router = APIRouter()


@router.get("/", response_model=ShelterListResponse)
async def list_shelters(
    filters: ShelterFilters = Depends(),
    shelter_service: ShelterService = Depends(get_shelter_service),
):
    shelters = await shelter_service.get_all(filters, filters.model_dump(exclude=set(ListQuery.model_fields)))
    return ShelterListResponse(
        success=True,
        shelters=[ShelterResponse.model_validate(shelter) for shelter in shelters],
        pagination=PaginationMeta(page=filters.page, page_size=filters.page_size, count=len(shelters)),
    )


@router.get("/{shelter_id}", response_model=ShelterDetailResponse)
async def get_shelter(
    shelter_id: str,
    shelter_service: ShelterService = Depends(get_shelter_service),
):
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    return ShelterDetailResponse(success=True, shelter=ShelterResponse.model_validate(shelter))


@router.post("/", response_model=ShelterDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_shelter(
    shelter_data: ShelterCreate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(require_permission(ResourceType.SHELTERS, Action.CREATE)),
    shelter_service: ShelterService = Depends(get_shelter_service),
):
    shelter = await shelter_service.create(**shelter_data.model_dump())
    log_operation("create", ResourceType.SHELTERS.value, current_user.id, shelter_id=shelter.id)

    return ShelterDetailResponse(
        success=True,
        message="Shelter created successfully",
        shelter=ShelterResponse.model_validate(shelter),
    )


@router.patch("/{shelter_id}", response_model=ShelterDetailResponse)
async def update_shelter(
    shelter_id: str,
    shelter_data: ShelterUpdate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    shelter_service: ShelterService = Depends(get_shelter_service),
):
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    require(checker, ResourceType.SHELTERS, Action.UPDATE, shelter.to_permission_data())

    shelter = await shelter_service.update(shelter, shelter_data.model_dump(exclude_unset=True))
    log_operation("update", ResourceType.SHELTERS.value, current_user.id, shelter_id=shelter.id)

    return ShelterDetailResponse(
        success=True,
        message="Shelter updated successfully",
        shelter=ShelterResponse.model_validate(shelter),
    )


@router.delete("/{shelter_id}", response_model=BaseResponse)
async def delete_shelter(
    shelter_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    shelter_service: ShelterService = Depends(get_shelter_service),
):
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    require(checker, ResourceType.SHELTERS, Action.DELETE, shelter.to_permission_data())

    await shelter_service.delete(shelter)
    log_operation("delete", ResourceType.SHELTERS.value, current_user.id, shelter_id=shelter_id)

    return BaseResponse(success=True, message="Shelter deleted successfully")


@router.get("/{shelter_id}/managers", response_model=ShelterManagersResponse)
async def list_shelter_managers(
    shelter_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    shelter_service: ShelterService = Depends(get_shelter_service),
    manager_service: ShelterManagerService = Depends(get_shelter_manager_service),
):
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    require(checker, ResourceType.SHELTERS, Action.UPDATE, shelter.to_permission_data())

    user_ids = await manager_service.get_shelter_manager_ids(shelter_id)
    return ShelterManagersResponse(success=True, shelter_id=shelter_id, user_ids=user_ids)


@router.post(
    "/{shelter_id}/managers",
    response_model=ShelterManagersResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_shelter_manager(
    shelter_id: str,
    manager_data: ShelterManagerAdd,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    shelter_service: ShelterService = Depends(get_shelter_service),
    manager_service: ShelterManagerService = Depends(get_shelter_manager_service),
    user_service: UserService = Depends(get_user_service),
):
    """Assign a user to manage the shelter."""
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    require(checker, ResourceType.SHELTERS, Action.UPDATE, shelter.to_permission_data())
    await get_or_404(user_service, manager_data.user_id, "User")

    user_ids = await manager_service.get_shelter_manager_ids(shelter_id)
    if manager_data.user_id in user_ids:
        raise ConflictError("User already manages this shelter")

    await manager_service.add_shelter_manager(shelter_id, manager_data.user_id)
    log_operation(
        "add_manager",
        ResourceType.SHELTERS.value,
        current_user.id,
        shelter_id=shelter_id,
        manager_id=manager_data.user_id,
    )

    return ShelterManagersResponse(
        success=True,
        message="Shelter manager added successfully",
        shelter_id=shelter_id,
        user_ids=[*user_ids, manager_data.user_id],
    )


@router.delete("/{shelter_id}/managers/{user_id}", response_model=BaseResponse)
async def remove_shelter_manager(
    shelter_id: str,
    user_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    shelter_service: ShelterService = Depends(get_shelter_service),
    manager_service: ShelterManagerService = Depends(get_shelter_manager_service),
):
    shelter = await get_or_404(shelter_service, shelter_id, "Shelter")
    require(checker, ResourceType.SHELTERS, Action.UPDATE, shelter.to_permission_data())

    if not await manager_service.remove_shelter_manager(shelter_id, user_id):
        raise NotFoundError("Shelter manager", user_id)
    log_operation("remove_manager", ResourceType.SHELTERS.value, current_user.id, shelter_id=shelter_id, manager_id=user_id)

    return BaseResponse(success=True, message="Shelter manager removed successfully")
