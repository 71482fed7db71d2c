"""Built-in role templates.

Each template is a factory that binds its role parameters into the rules it
returns. The captured values are listed in the template's docstring; nothing
else leaks into the predicates.
"""

from collections.abc import Callable, Collection
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

from petshelter.utils.exceptions import ConfigurationError

from .definitions import Action, ResourceType
from .policy_set import PolicySet
from .rules import in_shelters, is_one_of_shelters, owned_by


class RoleName(str, Enum):
    """Role identifiers a subject can carry."""

    ADMIN = "admin"
    ADOPTER = "adopter"
    DONOR = "donor"
    BOTH = "both"
    SHELTER_MANAGER = "shelterManager"


# Roles a user may pick when registering
SELF_SERVICE_ROLES = frozenset({RoleName.ADOPTER, RoleName.DONOR, RoleName.BOTH})


@dataclass(frozen=True)
class RoleParams:
    """Role-scoped parameters supplied by the authentication layer."""

    user_id: Optional[str] = None
    shelter_ids: frozenset = field(default_factory=frozenset)

    @classmethod
    def for_user(cls, user_id: str, shelter_ids: Collection[str] = ()) -> "RoleParams":
        return cls(user_id=user_id, shelter_ids=frozenset(shelter_ids))


_READ_ONLY = {
    Action.CREATE: False,
    Action.READ: True,
    Action.UPDATE: False,
    Action.DELETE: False,
}


def admin_permissions() -> PolicySet:
    """Everything allowed. Captures nothing."""
    return PolicySet.from_mapping(
        RoleName.ADMIN.value,
        {resource: {action: True for action in Action} for resource in ResourceType},
    )


def adopter_permissions(user_id: str) -> PolicySet:
    """Browse animals and shelters, manage own adoption requests. Captures ``user_id``."""
    own_request = owned_by(user_id)
    return PolicySet.from_mapping(
        RoleName.ADOPTER.value,
        {
            ResourceType.ANIMALS: dict(_READ_ONLY),
            ResourceType.ADOPTION_REQUESTS: {
                Action.CREATE: True,
                Action.READ: own_request,
                Action.UPDATE: own_request,
                Action.DELETE: own_request,
            },
            ResourceType.SHELTERS: dict(_READ_ONLY),
        },
    )


def donor_permissions(user_id: str) -> PolicySet:
    """List animals for adoption and manage own animals. Captures ``user_id``."""
    own = owned_by(user_id)
    return PolicySet.from_mapping(
        RoleName.DONOR.value,
        {
            ResourceType.ANIMALS: {
                Action.CREATE: True,
                Action.READ: True,
                Action.UPDATE: own,
                Action.DELETE: own,
            },
            ResourceType.ADOPTION_REQUESTS: {
                Action.CREATE: False,
                Action.READ: True,
                Action.UPDATE: own,
                Action.DELETE: own,
            },
            ResourceType.SHELTERS: dict(_READ_ONLY),
        },
    )


def both_permissions(user_id: str) -> PolicySet:
    """Union of adopter and donor. Captures ``user_id``."""
    own = owned_by(user_id)
    return PolicySet.from_mapping(
        RoleName.BOTH.value,
        {
            ResourceType.ANIMALS: {
                Action.CREATE: True,
                Action.READ: True,
                Action.UPDATE: own,
                Action.DELETE: own,
            },
            ResourceType.ADOPTION_REQUESTS: {
                Action.CREATE: True,
                Action.READ: own,
                Action.UPDATE: own,
                Action.DELETE: own,
            },
            ResourceType.SHELTERS: dict(_READ_ONLY),
        },
    )


def shelter_manager_permissions(user_id: str, shelter_ids: Collection[str]) -> PolicySet:
    """Manage animals and details of the managed shelters.

    Captures ``user_id`` and a frozen copy of ``shelter_ids``.
    """
    managed = frozenset(shelter_ids)
    shelter_animal = in_shelters(managed)
    own_request = owned_by(user_id)
    return PolicySet.from_mapping(
        RoleName.SHELTER_MANAGER.value,
        {
            ResourceType.ANIMALS: {
                Action.CREATE: True,
                Action.READ: True,
                Action.UPDATE: shelter_animal,
                Action.DELETE: shelter_animal,
            },
            ResourceType.ADOPTION_REQUESTS: {
                Action.CREATE: False,
                Action.READ: own_request,
                Action.UPDATE: own_request,
                Action.DELETE: own_request,
            },
            ResourceType.SHELTERS: {
                Action.CREATE: False,
                Action.READ: True,
                Action.UPDATE: is_one_of_shelters(managed),
                Action.DELETE: False,
            },
        },
    )


@dataclass(frozen=True)
class RoleTemplate:
    """Named, parameterized factory producing a PolicySet."""

    name: RoleName
    factory: Callable[[RoleParams], PolicySet]
    requires_user: bool = True

    def __call__(self, params: RoleParams) -> PolicySet:
        if self.requires_user and not params.user_id:
            raise ConfigurationError(
                f"Role template '{self.name.value}' requires a user id",
                details={"role": self.name.value},
            )
        return self.factory(params)


BUILTIN_TEMPLATES = MappingProxyType(
    {
        RoleName.ADMIN: RoleTemplate(RoleName.ADMIN, lambda params: admin_permissions(), requires_user=False),
        RoleName.ADOPTER: RoleTemplate(RoleName.ADOPTER, lambda params: adopter_permissions(params.user_id)),
        RoleName.DONOR: RoleTemplate(RoleName.DONOR, lambda params: donor_permissions(params.user_id)),
        RoleName.BOTH: RoleTemplate(RoleName.BOTH, lambda params: both_permissions(params.user_id)),
        RoleName.SHELTER_MANAGER: RoleTemplate(
            RoleName.SHELTER_MANAGER,
            lambda params: shelter_manager_permissions(params.user_id, params.shelter_ids),
        ),
    }
)
