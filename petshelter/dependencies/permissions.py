"""Permission dependencies: build the request's checker and gate routes with it."""

import logging

from fastapi import Depends, Request

from petshelter.models.user import User
from petshelter.permissions import Action, PermissionChecker, ResourceType, RoleTemplateResolver
from petshelter.permissions.guards import require
from petshelter.permissions.subject import build_checker, requires_managed_shelters, subject_from_user
from petshelter.services.shelter_manager_service import ShelterManagerService

from .auth import get_current_active_user, get_optional_current_user
from .services import get_shelter_manager_service

logger = logging.getLogger(__name__)


def get_permission_resolver(request: Request) -> RoleTemplateResolver:
    """Resolver configured for the application at startup."""
    return request.app.state.permission_resolver


async def get_permission_checker(
    request: Request,
    current_user: User | None = Depends(get_optional_current_user),
    resolver: RoleTemplateResolver = Depends(get_permission_resolver),
    shelter_managers: ShelterManagerService = Depends(get_shelter_manager_service),
) -> PermissionChecker | None:
    """
    Checker for the current subject, built once per request.

    Returns None for anonymous requests and for users without a role; routes
    that need authorization treat that as a denial.
    """
    if hasattr(request.state, "permissions"):
        return request.state.permissions

    managed_shelter_ids: list[str] = []
    if current_user is not None and requires_managed_shelters(current_user.user_type):
        managed_shelter_ids = await shelter_managers.get_user_managed_shelter_ids(current_user.id)

    checker = build_checker(subject_from_user(current_user, managed_shelter_ids), resolver)
    if current_user is not None and checker is None:
        logger.warning(
            f"User {current_user.id} has no role; permissions not built",
            extra={"user_id": current_user.id},
        )

    request.state.permissions = checker
    return checker


def require_permission(resource_type: ResourceType, action: Action):
    """
    Dependency factory gating a route on a static check before the handler runs.

    Usage:
        @router.post("/", dependencies=[Depends(require_permission(ResourceType.ANIMALS, Action.CREATE))])
    """

    async def dependency(
        current_user: User = Depends(get_current_active_user),
        checker: PermissionChecker | None = Depends(get_permission_checker),
    ) -> PermissionChecker | None:
        require(checker, resource_type, action)
        return checker

    return dependency
