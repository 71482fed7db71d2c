"""Subject adapter: from authenticated user metadata to a permission checker."""

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any, Optional

from .checker import PermissionChecker
from .resolver import RoleTemplateResolver
from .templates import RoleName, RoleParams


@dataclass(frozen=True)
class Subject:
    """Authenticated actor as seen by the permission engine."""

    role_name: str
    role_params: RoleParams


def requires_managed_shelters(role_name: Optional[str]) -> bool:
    """Whether building this role's policy needs the subject's managed shelter ids."""
    return role_name == RoleName.SHELTER_MANAGER.value


def subject_from_user(user: Any, managed_shelter_ids: Collection[str] = ()) -> Optional[Subject]:
    """
    Describe ``user`` for the permission engine.

    Returns None when there is no user or the user carries no role, in which
    case no checker is built and the caller decides what an ungated subject may do.
    """
    if user is None or not getattr(user, "user_type", None):
        return None
    return Subject(
        role_name=user.user_type,
        role_params=RoleParams.for_user(user.id, managed_shelter_ids),
    )


def build_checker(subject: Optional[Subject], resolver: RoleTemplateResolver) -> Optional[PermissionChecker]:
    """Resolve the subject's policy set and wrap it in a checker."""
    if subject is None:
        return None
    return PermissionChecker(resolver.resolve(subject.role_name, subject.role_params), resolver.registry)
