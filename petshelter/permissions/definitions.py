"""Resource types, actions and the permission definition registry."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional, Union

from petshelter.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from .policy_set import PolicySet


class ResourceType(str, Enum):
    """Protected resource kinds."""

    ANIMALS = "animals"
    ADOPTION_REQUESTS = "adoptionRequests"
    SHELTERS = "shelters"


class Action(str, Enum):
    """CRUD actions for authorization."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


CRUD = frozenset(Action)


@dataclass(frozen=True)
class AnimalData:
    """Projection of an animal needed to decide access."""

    id: Optional[str]
    user_id: Optional[str] = None
    shelter_id: Optional[str] = None


@dataclass(frozen=True)
class AdoptionRequestData:
    """Projection of an adoption request needed to decide access."""

    id: Optional[str]
    user_id: Optional[str] = None
    animal_id: Optional[str] = None


@dataclass(frozen=True)
class ShelterData:
    """Projection of a shelter needed to decide access."""

    id: Optional[str]


ResourceInstance = Union[AnimalData, AdoptionRequestData, ShelterData]


@dataclass(frozen=True)
class PolicyResult:
    """Result of policy evaluation."""

    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls, reason: Optional[str] = None) -> "PolicyResult":
        """Create an allow result."""
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: str) -> "PolicyResult":
        """Create a deny result."""
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed


@dataclass(frozen=True)
class ResourceDefinition:
    """Closed set of actions a resource type exposes, and its instance type."""

    actions: frozenset
    instance_type: type


def coerce_resource_type(value: Union[ResourceType, str]) -> ResourceType:
    """Convert a string into a ResourceType, raising ConfigurationError on unknown names."""
    try:
        return ResourceType(value)
    except ValueError:
        raise ConfigurationError(
            f"Unknown resource type: {value!r}", details={"resource": str(value)}
        ) from None


def coerce_action(value: Union[Action, str]) -> Action:
    """Convert a string into an Action, raising ConfigurationError on unknown names."""
    try:
        return Action(value)
    except ValueError:
        raise ConfigurationError(
            f"Unknown action: {value!r}", details={"action": str(value)}
        ) from None


class PermissionRegistry:
    """
    Immutable declaration of every (resource type, action) pair the application exposes.

    The registry is a plain value: build as many as needed and hand one to the
    role template resolver. An action omitted from a resource's definition cannot
    be asked about at all.
    """

    def __init__(self, definitions: Mapping[ResourceType, ResourceDefinition]):
        if not definitions:
            raise ConfigurationError("Permission registry must declare at least one resource type")
        for resource_type, definition in definitions.items():
            if not definition.actions:
                raise ConfigurationError(
                    f"Resource type '{resource_type.value}' declares no actions",
                    details={"resource": resource_type.value},
                )
        self._definitions = MappingProxyType(dict(definitions))

    @property
    def resource_types(self) -> frozenset:
        return frozenset(self._definitions)

    def definition(self, resource_type: ResourceType) -> ResourceDefinition:
        try:
            return self._definitions[resource_type]
        except KeyError:
            raise ConfigurationError(
                f"Resource type '{resource_type}' is not registered",
                details={"resource": str(resource_type)},
            ) from None

    def actions_for(self, resource_type: ResourceType) -> frozenset:
        return self.definition(resource_type).actions

    def check_instance(self, resource_type: ResourceType, instance: Optional[ResourceInstance]) -> None:
        """Raise ConfigurationError when ``instance`` is not the snapshot type declared for ``resource_type``."""
        if instance is None:
            return
        expected = self.definition(resource_type).instance_type
        if not isinstance(instance, expected):
            raise ConfigurationError(
                f"Expected {expected.__name__} for '{resource_type.value}', got {type(instance).__name__}",
                details={"resource": resource_type.value, "instance_type": type(instance).__name__},
            )

    def is_declared(self, resource_type: ResourceType, action: Action) -> bool:
        definition = self._definitions.get(resource_type)
        return definition is not None and action in definition.actions

    def pairs(self) -> list[tuple[ResourceType, Action]]:
        """All declared (resource type, action) pairs in a stable order."""
        return [
            (resource_type, action)
            for resource_type in sorted(self._definitions, key=lambda r: r.value)
            for action in sorted(self._definitions[resource_type].actions, key=lambda a: a.value)
        ]

    def validate(self, policy_set: "PolicySet") -> None:
        """
        Ensure a policy set defines exactly the declared pairs.

        Raises ConfigurationError listing every missing and undeclared pair.
        """
        declared = set(self.pairs())
        defined = set(policy_set.pairs())

        missing = sorted(f"{r.value}:{a.value}" for r, a in declared - defined)
        extra = sorted(f"{r.value}:{a.value}" for r, a in defined - declared)

        if missing or extra:
            problems = []
            if missing:
                problems.append(f"missing rules for {', '.join(missing)}")
            if extra:
                problems.append(f"rules for undeclared pairs {', '.join(extra)}")
            raise ConfigurationError(
                f"Policy set '{policy_set.role}' is invalid: {'; '.join(problems)}",
                details={"role": policy_set.role, "missing": missing, "undeclared": extra},
            )


def default_registry() -> PermissionRegistry:
    """Registry for the resource types exposed by the adoption service."""
    return PermissionRegistry(
        {
            ResourceType.ANIMALS: ResourceDefinition(actions=CRUD, instance_type=AnimalData),
            ResourceType.ADOPTION_REQUESTS: ResourceDefinition(
                actions=CRUD, instance_type=AdoptionRequestData
            ),
            ResourceType.SHELTERS: ResourceDefinition(actions=CRUD, instance_type=ShelterData),
        }
    )
