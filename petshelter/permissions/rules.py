"""Permission rules: static decisions and dynamic predicates over a resource instance."""

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Any, Optional, Union

from petshelter.utils.exceptions import ConfigurationError

Predicate = Callable[[Optional[Any]], bool]


@dataclass(frozen=True)
class StaticRule:
    """Decision independent of the targeted instance."""

    allowed: bool

    @property
    def description(self) -> str:
        return "always" if self.allowed else "never"


@dataclass(frozen=True)
class DynamicRule:
    """Decision computed from the targeted instance.

    The predicate receives ``None`` when no instance is available and must deny
    whenever it needs a field of the instance.
    """

    predicate: Predicate
    description: str = "dynamic"

    def __call__(self, instance: Optional[Any]) -> bool:
        return bool(self.predicate(instance))


Rule = Union[StaticRule, DynamicRule]


def as_rule(value: Union[bool, Predicate, Rule]) -> Rule:
    """Normalise a template entry into a Rule."""
    if isinstance(value, (StaticRule, DynamicRule)):
        return value
    if isinstance(value, bool):
        return StaticRule(value)
    if callable(value):
        return DynamicRule(value, getattr(value, "__name__", "dynamic"))
    raise ConfigurationError(
        f"Rule must be a bool or a predicate, got {type(value).__name__}",
        details={"rule_type": type(value).__name__},
    )


def owned_by(user_id: Optional[str]) -> DynamicRule:
    """Allow when the instance's ``user_id`` equals ``user_id`` exactly."""

    def predicate(instance: Optional[Any]) -> bool:
        if instance is None or user_id is None:
            return False
        return instance.user_id is not None and instance.user_id == user_id

    return DynamicRule(predicate, f"owned by user {user_id}")


def in_shelters(shelter_ids: Collection[str]) -> DynamicRule:
    """Allow when the instance belongs to one of ``shelter_ids``."""
    shelters = frozenset(shelter_ids)

    def predicate(instance: Optional[Any]) -> bool:
        if instance is None or not instance.shelter_id:
            return False
        return instance.shelter_id in shelters

    return DynamicRule(predicate, f"in shelters {sorted(shelters)}")


def is_one_of_shelters(shelter_ids: Collection[str]) -> DynamicRule:
    """Allow when the instance is itself one of ``shelter_ids``."""
    shelters = frozenset(shelter_ids)

    def predicate(instance: Optional[Any]) -> bool:
        if instance is None or not instance.id:
            return False
        return instance.id in shelters

    return DynamicRule(predicate, f"one of shelters {sorted(shelters)}")
