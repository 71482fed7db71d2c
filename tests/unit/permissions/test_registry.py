"""Tests for the permission definition registry and policy sets."""

import pytest

from petshelter.permissions import (
    Action,
    AnimalData,
    PermissionRegistry,
    PolicySet,
    ResourceDefinition,
    ResourceType,
    StaticRule,
    default_registry,
)
from petshelter.permissions.definitions import CRUD
from petshelter.utils.exceptions import ConfigurationError


def full_mapping(value=True):
    return {resource: {action: value for action in Action} for resource in ResourceType}


class TestPermissionRegistry:
    """Declared pairs and validation."""

    def test_default_registry_declares_crud_for_every_resource(self):
        registry = default_registry()

        assert registry.resource_types == frozenset(ResourceType)
        for resource_type in ResourceType:
            assert registry.actions_for(resource_type) == CRUD
        assert len(registry.pairs()) == len(ResourceType) * len(Action)

    def test_registries_are_independent_values(self):
        first = default_registry()
        second = PermissionRegistry(
            {ResourceType.SHELTERS: ResourceDefinition(actions=frozenset({Action.READ}), instance_type=AnimalData)}
        )

        assert first.is_declared(ResourceType.ANIMALS, Action.DELETE)
        assert not second.is_declared(ResourceType.ANIMALS, Action.DELETE)
        assert second.pairs() == [(ResourceType.SHELTERS, Action.READ)]

    def test_empty_registry_is_rejected(self):
        with pytest.raises(ConfigurationError):
            PermissionRegistry({})

    def test_unknown_resource_type_lookup_raises(self):
        registry = PermissionRegistry(
            {ResourceType.SHELTERS: ResourceDefinition(actions=CRUD, instance_type=AnimalData)}
        )

        with pytest.raises(ConfigurationError):
            registry.definition(ResourceType.ANIMALS)

    def test_validate_accepts_complete_policy_set(self):
        default_registry().validate(PolicySet.from_mapping("test", full_mapping()))

    def test_validate_lists_missing_pairs(self):
        mapping = full_mapping()
        del mapping[ResourceType.SHELTERS][Action.DELETE]
        del mapping[ResourceType.ANIMALS][Action.CREATE]

        with pytest.raises(ConfigurationError) as exc_info:
            default_registry().validate(PolicySet.from_mapping("gappy", mapping))

        assert exc_info.value.details["missing"] == ["animals:create", "shelters:delete"]
        assert exc_info.value.details["undeclared"] == []

    def test_validate_rejects_undeclared_pairs(self):
        registry = PermissionRegistry(
            {
                resource: ResourceDefinition(actions=frozenset({Action.READ}), instance_type=AnimalData)
                for resource in ResourceType
            }
        )

        with pytest.raises(ConfigurationError) as exc_info:
            registry.validate(PolicySet.from_mapping("too-much", full_mapping()))

        assert "shelters:delete" in exc_info.value.details["undeclared"]
        assert exc_info.value.details["missing"] == []


class TestPolicySet:
    """Construction and lookup."""

    def test_from_mapping_normalises_rules(self):
        policy_set = PolicySet.from_mapping(
            "mixed",
            {"animals": {"read": True, "update": lambda instance: False}},
        )

        assert policy_set.rule_for(ResourceType.ANIMALS, Action.READ) == StaticRule(True)
        assert callable(policy_set.rule_for(ResourceType.ANIMALS, Action.UPDATE))

    def test_non_rule_values_are_rejected(self):
        with pytest.raises(ConfigurationError):
            PolicySet.from_mapping("broken", {ResourceType.ANIMALS: {Action.READ: "yes"}})

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(ConfigurationError):
            PolicySet.from_mapping("broken", {"dogs": {Action.READ: True}})
        with pytest.raises(ConfigurationError):
            PolicySet.from_mapping("broken", {ResourceType.ANIMALS: {"adopt": True}})

    def test_duplicate_resource_keys_are_rejected(self):
        with pytest.raises(ConfigurationError):
            PolicySet.from_mapping(
                "duplicate",
                {ResourceType.ANIMALS: {Action.READ: True}, "animals": {Action.READ: False}},
            )

    def test_missing_rule_raises_configuration_error(self):
        policy_set = PolicySet.from_mapping("partial", {ResourceType.ANIMALS: {Action.READ: True}})

        assert not policy_set.has_rule(ResourceType.SHELTERS, Action.READ)
        with pytest.raises(ConfigurationError):
            policy_set.rule_for(ResourceType.SHELTERS, Action.READ)

    def test_policy_set_is_read_only(self):
        policy_set = PolicySet.from_mapping("frozen", full_mapping())

        with pytest.raises(TypeError):
            policy_set._rules[ResourceType.ANIMALS] = {}
        with pytest.raises(AttributeError):
            policy_set.extra = 1

    def test_describe_reports_static_and_dynamic_rules(self):
        policy_set = PolicySet.from_mapping(
            "described",
            {ResourceType.ANIMALS: {Action.READ: True, Action.DELETE: False}},
        )

        assert policy_set.describe() == {"animals": {"delete": False, "read": True}}
