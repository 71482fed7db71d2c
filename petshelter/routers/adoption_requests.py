"""Adoption request routes."""

from fastapi import APIRouter, Depends, status

from petshelter.dependencies.auth import get_current_active_user
from petshelter.dependencies.permissions import get_permission_checker, require_permission
from petshelter.dependencies.services import get_adoption_request_service, get_animal_service
from petshelter.models.adoption_request import AdoptionRequest
from petshelter.models.user import User
from petshelter.permissions import Action, PermissionChecker, ResourceType, can, filter_allowed, require
from petshelter.schemas.adoption_request import (
    AdoptionRequestCreate,
    AdoptionRequestDetailResponse,
    AdoptionRequestFilters,
    AdoptionRequestListResponse,
    AdoptionRequestResponse,
    AdoptionRequestUpdate,
)
from petshelter.schemas.common import BaseResponse, ListQuery, PaginationMeta
from petshelter.services.adoption_request_service import AdoptionRequestService
from petshelter.services.animal_service import AnimalService

from .common import get_or_404, log_operation

router = APIRouter()


@router.get("/", response_model=AdoptionRequestListResponse)
async def list_adoption_requests(
    filters: AdoptionRequestFilters = Depends(),
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    service: AdoptionRequestService = Depends(get_adoption_request_service),
):
    """
    List the adoption requests the current user may read.

    Roles that may read every request page in SQL. For row-scoped roles the
    query is narrowed to the caller's requests, filtered row by row and only
    then paged, so every page holds readable rows.
    """
    scope = filters.model_dump(exclude=set(ListQuery.model_fields))

    if can(checker, ResourceType.ADOPTION_REQUESTS, Action.READ):
        rows = await service.get_all(filters, scope)
    else:
        if scope["user_id"] is None:
            scope["user_id"] = current_user.id
        readable = filter_allowed(
            checker,
            ResourceType.ADOPTION_REQUESTS,
            Action.READ,
            await service.get_all(filters, scope, paginate=False),
            AdoptionRequest.to_permission_data,
        )
        rows = readable[filters.offset : filters.offset + filters.page_size]

    return AdoptionRequestListResponse(
        success=True,
        adoption_requests=[AdoptionRequestResponse.model_validate(row) for row in rows],
        pagination=PaginationMeta(page=filters.page, page_size=filters.page_size, count=len(rows)),
    )


@router.get("/{request_id}", response_model=AdoptionRequestDetailResponse)
async def get_adoption_request(
    request_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    service: AdoptionRequestService = Depends(get_adoption_request_service),
):
    adoption_request = await get_or_404(service, request_id, "Adoption request")
    require(checker, ResourceType.ADOPTION_REQUESTS, Action.READ, adoption_request.to_permission_data())

    return AdoptionRequestDetailResponse(
        success=True,
        adoption_request=AdoptionRequestResponse.model_validate(adoption_request),
    )


@router.post("/", response_model=AdoptionRequestDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_adoption_request(
    request_data: AdoptionRequestCreate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(
        require_permission(ResourceType.ADOPTION_REQUESTS, Action.CREATE)
    ),
    service: AdoptionRequestService = Depends(get_adoption_request_service),
    animal_service: AnimalService = Depends(get_animal_service),
):
    """File an adoption request on behalf of the current user."""
    await get_or_404(animal_service, request_data.animal_id, "Animal")

    adoption_request = await service.create(user_id=current_user.id, **request_data.model_dump())
    log_operation(
        "create",
        ResourceType.ADOPTION_REQUESTS.value,
        current_user.id,
        adoption_request_id=adoption_request.id,
        animal_id=adoption_request.animal_id,
    )

    return AdoptionRequestDetailResponse(
        success=True,
        message="Adoption request created successfully",
        adoption_request=AdoptionRequestResponse.model_validate(adoption_request),
    )


@router.patch("/{request_id}", response_model=AdoptionRequestDetailResponse)
async def update_adoption_request(
    request_id: str,
    request_data: AdoptionRequestUpdate,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    service: AdoptionRequestService = Depends(get_adoption_request_service),
):
    adoption_request = await get_or_404(service, request_id, "Adoption request")
    require(checker, ResourceType.ADOPTION_REQUESTS, Action.UPDATE, adoption_request.to_permission_data())

    adoption_request = await service.update(adoption_request, request_data.model_dump(exclude_unset=True))
    log_operation(
        "update",
        ResourceType.ADOPTION_REQUESTS.value,
        current_user.id,
        adoption_request_id=adoption_request.id,
    )

    return AdoptionRequestDetailResponse(
        success=True,
        message="Adoption request updated successfully",
        adoption_request=AdoptionRequestResponse.model_validate(adoption_request),
    )


@router.delete("/{request_id}", response_model=BaseResponse)
async def delete_adoption_request(
    request_id: str,
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
    service: AdoptionRequestService = Depends(get_adoption_request_service),
):
    adoption_request = await get_or_404(service, request_id, "Adoption request")
    require(checker, ResourceType.ADOPTION_REQUESTS, Action.DELETE, adoption_request.to_permission_data())

    await service.delete(adoption_request)
    log_operation("delete", ResourceType.ADOPTION_REQUESTS.value, current_user.id, adoption_request_id=request_id)

    return BaseResponse(success=True, message="Adoption request deleted successfully")
