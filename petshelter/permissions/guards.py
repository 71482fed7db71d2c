"""Guard helpers for authorization checks."""

from collections.abc import Iterable
from typing import Callable, Optional, TypeVar, Union

from petshelter.utils.exceptions import PermissionDeniedError

from .checker import PermissionChecker
from .definitions import Action, ResourceInstance, ResourceType

T = TypeVar("T")


def _name(value: Union[ResourceType, Action, str]) -> str:
    return value.value if isinstance(value, (ResourceType, Action)) else str(value)


def can(
    checker: Optional[PermissionChecker],
    resource_type: Union[ResourceType, str],
    action: Union[Action, str],
    instance: Optional[ResourceInstance] = None,
) -> bool:
    """
    Check if the subject behind ``checker`` can perform ``action``.

    A missing checker (no role resolved for the subject) never grants access.

    Usage:
        can(checker, ResourceType.ANIMALS, Action.CREATE)
        can(checker, ResourceType.ANIMALS, Action.UPDATE, animal.to_permission_data())
    """
    if checker is None:
        return False
    return checker.check(resource_type, action, instance)


def require(
    checker: Optional[PermissionChecker],
    resource_type: Union[ResourceType, str],
    action: Union[Action, str],
    instance: Optional[ResourceInstance] = None,
) -> None:
    """
    Require that the subject can perform ``action``.
    Raises PermissionDeniedError if not allowed.

    Usage:
        require(checker, ResourceType.SHELTERS, Action.UPDATE, shelter.to_permission_data())
    """
    if checker is None:
        raise PermissionDeniedError(_name(resource_type), _name(action), reason="No permissions resolved")

    result = checker.evaluate(resource_type, action, instance)
    if not result.allowed:
        raise PermissionDeniedError(_name(resource_type), _name(action), reason=result.reason)


def filter_allowed(
    checker: Optional[PermissionChecker],
    resource_type: Union[ResourceType, str],
    action: Union[Action, str],
    items: Iterable[T],
    project: Callable[[T], ResourceInstance],
) -> list[T]:
    """Keep the items whose projected instance passes the check."""
    if checker is None:
        return []
    return [item for item in items if checker.check(resource_type, action, project(item))]
