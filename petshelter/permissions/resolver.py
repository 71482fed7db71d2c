"""Role template resolution."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Union

from petshelter.utils.exceptions import ConfigurationError

from .definitions import PermissionRegistry
from .policy_set import PolicySet
from .templates import BUILTIN_TEMPLATES, RoleName, RoleParams, RoleTemplate

logger = logging.getLogger(__name__)

_SAMPLE_PARAMS = RoleParams(user_id="sample-user", shelter_ids=frozenset({"sample-shelter"}))

# Roles an unrecognized role name may resolve to; none grants more than an adopter
FALLBACK_ROLES = frozenset({RoleName.ADOPTER})


class RoleTemplateResolver:
    """
    Map ``(role name, role params)`` to a validated PolicySet.

    Unrecognized role names resolve to ``fallback_role`` and are logged as
    configuration errors. The fallback must be one of ``FALLBACK_ROLES`` so a
    mistyped role never gains privileges. With ``strict=True`` unrecognized
    names raise ConfigurationError instead.
    """

    def __init__(
        self,
        registry: PermissionRegistry,
        templates: Mapping[RoleName, RoleTemplate] = BUILTIN_TEMPLATES,
        fallback_role: Union[RoleName, str] = RoleName.ADOPTER,
        strict: bool = False,
    ):
        try:
            fallback_role = RoleName(fallback_role)
        except ValueError:
            raise ConfigurationError(
                f"Unknown fallback role '{fallback_role}'", details={"role": str(fallback_role)}
            ) from None
        if fallback_role not in FALLBACK_ROLES:
            raise ConfigurationError(
                f"Fallback role '{fallback_role.value}' grants more than the least privileged role",
                details={"role": fallback_role.value, "allowed": sorted(role.value for role in FALLBACK_ROLES)},
            )
        if fallback_role not in templates:
            raise ConfigurationError(
                f"Fallback role '{fallback_role.value}' has no template",
                details={"role": fallback_role.value},
            )
        self.registry = registry
        self.fallback_role = fallback_role
        self.strict = strict
        self._templates = MappingProxyType(dict(templates))

    @property
    def roles(self) -> frozenset:
        return frozenset(self._templates)

    def template_for(self, role_name: Union[RoleName, str]) -> RoleTemplate:
        """Select the template for a role name, applying the fallback policy."""
        try:
            role = RoleName(role_name)
            return self._templates[role]
        except (ValueError, KeyError):
            error = ConfigurationError(
                f"Unrecognized role '{role_name}'",
                details={"role": str(role_name), "fallback": self.fallback_role.value},
            )
            if self.strict:
                raise error from None

            logger.error(
                f"{error.message}, falling back to '{self.fallback_role.value}'",
                extra={"error_code": error.error_code, "details": error.details},
            )
            return self._templates[self.fallback_role]

    def resolve(self, role_name: Union[RoleName, str], params: RoleParams) -> PolicySet:
        """Instantiate the matching template with ``params`` and validate the result."""
        template = self.template_for(role_name)
        policy_set = template(params)
        self.registry.validate(policy_set)

        logger.debug(
            f"Resolved policy set '{policy_set.role}'",
            extra={"role": policy_set.role, "user_id": params.user_id},
        )
        return policy_set

    def validate_templates(self) -> None:
        """
        Instantiate every template with sample parameters and validate it.

        Called at startup so a template with a gap fails loudly before any
        request is served.
        """
        for role, template in self._templates.items():
            self.registry.validate(template(_SAMPLE_PARAMS))
            logger.debug(f"Role template '{role.value}' validated")
