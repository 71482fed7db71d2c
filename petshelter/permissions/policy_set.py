"""Resolved, immutable rule table for one subject."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Union

from petshelter.utils.exceptions import ConfigurationError

from .definitions import Action, ResourceType, coerce_action, coerce_resource_type
from .rules import Rule, StaticRule, as_rule


class PolicySet:
    """Mapping from every (resource type, action) pair to a Rule.

    Built once per subject from a role template and never mutated afterwards.
    """

    __slots__ = ("_role", "_rules")

    def __init__(self, role: str, rules: Mapping[ResourceType, Mapping[Action, Rule]]):
        self._role = role
        self._rules = MappingProxyType(
            {resource: MappingProxyType(dict(actions)) for resource, actions in rules.items()}
        )

    @classmethod
    def from_mapping(
        cls,
        role: str,
        mapping: Mapping[Union[ResourceType, str], Mapping[Union[Action, str], Any]],
    ) -> "PolicySet":
        """Build a policy set from a nested ``{resource: {action: bool | predicate}}`` table."""
        rules: dict[ResourceType, dict[Action, Rule]] = {}
        for resource_key, actions in mapping.items():
            resource_type = coerce_resource_type(resource_key)
            if resource_type in rules:
                raise ConfigurationError(
                    f"Duplicate rules for resource type '{resource_type.value}'",
                    details={"role": role, "resource": resource_type.value},
                )
            rules[resource_type] = {
                coerce_action(action_key): as_rule(value) for action_key, value in actions.items()
            }
        return cls(role, rules)

    @property
    def role(self) -> str:
        return self._role

    def pairs(self) -> list[tuple[ResourceType, Action]]:
        return [(resource, action) for resource, actions in self._rules.items() for action in actions]

    def has_rule(self, resource_type: ResourceType, action: Action) -> bool:
        return action in self._rules.get(resource_type, {})

    def rule_for(self, resource_type: ResourceType, action: Action) -> Rule:
        """Return the rule for a pair; a missing rule is a ConfigurationError."""
        try:
            return self._rules[resource_type][action]
        except KeyError:
            raise ConfigurationError(
                f"No rule defined for {getattr(action, 'value', action)} on "
                f"{getattr(resource_type, 'value', resource_type)} in policy set '{self._role}'",
                details={
                    "role": self._role,
                    "resource": str(getattr(resource_type, "value", resource_type)),
                    "action": str(getattr(action, "value", action)),
                },
            ) from None

    def describe(self) -> dict[str, dict[str, Union[bool, str]]]:
        """Serializable view: static rules as booleans, dynamic rules by description."""
        return {
            resource.value: {
                action.value: rule.allowed if isinstance(rule, StaticRule) else rule.description
                for action, rule in sorted(actions.items(), key=lambda item: item[0].value)
            }
            for resource, actions in sorted(self._rules.items(), key=lambda item: item[0].value)
        }

    def __repr__(self) -> str:
        return f"<PolicySet(role='{self._role}', rules={len(self.pairs())})>"
