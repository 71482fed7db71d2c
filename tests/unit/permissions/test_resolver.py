"""Role template resolution and the unknown-role fallback."""

import pytest

from petshelter.permissions import (
    BUILTIN_TEMPLATES,
    Action,
    AnimalData,
    PermissionChecker,
    PolicySet,
    ResourceType,
    RoleName,
    RoleParams,
    RoleTemplate,
    RoleTemplateResolver,
    default_registry,
)
from petshelter.utils.exceptions import ConfigurationError

PARAMS = RoleParams.for_user("u1", ["s1"])


def resolver(**kwargs):
    return RoleTemplateResolver(default_registry(), **kwargs)


def test_resolves_each_builtin_role():
    for role in RoleName:
        policy_set = resolver().resolve(role.value, PARAMS)
        assert policy_set.role == role.value


def test_unknown_role_falls_back_to_adopter(caplog):
    policy_set = resolver().resolve("superuser", PARAMS)

    assert policy_set.role == RoleName.ADOPTER.value
    assert "Unrecognized role 'superuser'" in caplog.text


def test_unknown_role_fallback_is_deterministic():
    first = resolver().resolve("mystery", PARAMS)
    second = resolver().resolve("mystery", PARAMS)

    assert first.describe() == second.describe()
    for resource_type, action in default_registry().pairs():
        for instance in (None, AnimalData(id="a1", user_id="u1")):
            assert PermissionChecker(first).check(resource_type, action, instance) == PermissionChecker(
                second
            ).check(resource_type, action, instance)


def test_strict_mode_rejects_unknown_roles():
    with pytest.raises(ConfigurationError):
        resolver(strict=True).resolve("mystery", PARAMS)


@pytest.mark.parametrize(
    "fallback_role", [RoleName.ADMIN, RoleName.DONOR, RoleName.BOTH, RoleName.SHELTER_MANAGER, "admin"]
)
def test_fallback_role_cannot_grant_more_than_adopter(fallback_role):
    with pytest.raises(ConfigurationError) as exc_info:
        resolver(fallback_role=fallback_role)

    assert exc_info.value.details["allowed"] == ["adopter"]


def test_unknown_fallback_role_is_rejected():
    with pytest.raises(ConfigurationError):
        resolver(fallback_role="superuser")


def test_mistyped_role_cannot_delete_shelters():
    checker = PermissionChecker(resolver().resolve("adoptr", PARAMS))

    assert checker.check(ResourceType.SHELTERS, Action.DELETE) is False
    assert checker.check(ResourceType.ANIMALS, Action.CREATE) is False


def test_fallback_role_must_have_a_template():
    with pytest.raises(ConfigurationError):
        RoleTemplateResolver(
            default_registry(),
            templates={RoleName.ADMIN: BUILTIN_TEMPLATES[RoleName.ADMIN]},
            fallback_role=RoleName.ADOPTER,
        )


def test_user_scoped_template_needs_user_id():
    with pytest.raises(ConfigurationError):
        resolver().resolve(RoleName.DONOR, RoleParams())

    assert resolver().resolve(RoleName.ADMIN, RoleParams()).role == "admin"


def test_validate_templates_passes_for_builtins():
    resolver().validate_templates()


def test_validate_templates_reports_incomplete_template():
    def incomplete(params):
        return PolicySet.from_mapping("adopter", {ResourceType.ANIMALS: {Action.READ: True}})

    templates = dict(BUILTIN_TEMPLATES)
    templates[RoleName.ADOPTER] = RoleTemplate(RoleName.ADOPTER, incomplete)

    with pytest.raises(ConfigurationError) as exc_info:
        resolver(templates=templates).validate_templates()

    assert "shelters:read" in exc_info.value.details["missing"]


def test_resolve_validates_against_the_given_registry():
    from petshelter.permissions import PermissionRegistry, ResourceDefinition

    narrow = PermissionRegistry(
        {ResourceType.SHELTERS: ResourceDefinition(actions=frozenset({Action.READ}), instance_type=AnimalData)}
    )

    with pytest.raises(ConfigurationError):
        RoleTemplateResolver(narrow).resolve(RoleName.ADMIN, PARAMS)


def test_roles_lists_every_builtin_template():
    assert resolver().roles == frozenset(RoleName)
