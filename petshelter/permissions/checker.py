"""Runtime permission checks against a resolved policy set."""

import logging
from typing import Optional, Union

from petshelter.utils.exceptions import ConfigurationError, PredicateEvaluationError

from .definitions import (
    Action,
    PermissionRegistry,
    PolicyResult,
    ResourceInstance,
    ResourceType,
    coerce_action,
    coerce_resource_type,
)
from .policy_set import PolicySet
from .rules import StaticRule

logger = logging.getLogger(__name__)


class PermissionChecker:
    """
    Single runtime entry point for permission decisions.

    ``check`` is total and side-effect free: it never raises, never caches and
    never mutates the policy set or the instance, so one checker can serve
    concurrent checks. Configuration defects and failing predicates are logged
    and turned into denials. With a ``registry``, an instance of the wrong
    snapshot type for the resource is a configuration defect too.
    """

    def __init__(self, policy_set: PolicySet, registry: Optional[PermissionRegistry] = None):
        self.policy_set = policy_set
        self.registry = registry

    @property
    def role(self) -> str:
        return self.policy_set.role

    def check(
        self,
        resource_type: Union[ResourceType, str],
        action: Union[Action, str],
        instance: Optional[ResourceInstance] = None,
    ) -> bool:
        """Return whether ``action`` on ``resource_type`` (optionally a specific instance) is allowed."""
        return self.evaluate(resource_type, action, instance).allowed

    def evaluate(
        self,
        resource_type: Union[ResourceType, str],
        action: Union[Action, str],
        instance: Optional[ResourceInstance] = None,
    ) -> PolicyResult:
        """Like ``check`` but keeps the reason for the decision."""
        try:
            resource = coerce_resource_type(resource_type)
            act = coerce_action(action)
            rule = self.policy_set.rule_for(resource, act)
            if self.registry is not None:
                self.registry.check_instance(resource, instance)
        except ConfigurationError as e:
            logger.error(
                f"Permission configuration error: {e.message}",
                extra={"error_code": e.error_code, "details": e.details, "role": self.role},
            )
            return PolicyResult.deny(e.message)

        if isinstance(rule, StaticRule):
            result = PolicyResult(allowed=rule.allowed, reason=f"static rule ({rule.description})")
        else:
            try:
                allowed = rule(instance)
            except Exception as exc:
                error = PredicateEvaluationError(resource.value, act.value, exc)
                logger.error(
                    error.message,
                    extra={"error_code": error.error_code, "details": error.details, "role": self.role},
                    exc_info=True,
                )
                return PolicyResult.deny(error.message)
            result = PolicyResult(allowed=allowed, reason=rule.description)

        if not result.allowed:
            logger.debug(
                f"Denied {act.value} on {resource.value} for role '{self.role}'",
                extra={
                    "role": self.role,
                    "resource": resource.value,
                    "action": act.value,
                    "instance_id": getattr(instance, "id", None),
                },
            )
        return result

    def __repr__(self) -> str:
        return f"<PermissionChecker(role='{self.role}')>"
