"""Attribute-based permission engine."""

from .checker import PermissionChecker
from .definitions import (
    Action,
    AdoptionRequestData,
    AnimalData,
    PermissionRegistry,
    PolicyResult,
    ResourceDefinition,
    ResourceType,
    ShelterData,
    default_registry,
)
from .guards import can, filter_allowed, require
from .policy_set import PolicySet
from .resolver import RoleTemplateResolver
from .rules import DynamicRule, StaticRule
from .subject import Subject, build_checker, subject_from_user
from .templates import BUILTIN_TEMPLATES, RoleName, RoleParams, RoleTemplate

__all__ = [
    "Action",
    "AdoptionRequestData",
    "AnimalData",
    "BUILTIN_TEMPLATES",
    "DynamicRule",
    "PermissionChecker",
    "PermissionRegistry",
    "PolicyResult",
    "PolicySet",
    "ResourceDefinition",
    "ResourceType",
    "RoleName",
    "RoleParams",
    "RoleTemplate",
    "RoleTemplateResolver",
    "ShelterData",
    "StaticRule",
    "Subject",
    "build_checker",
    "can",
    "default_registry",
    "filter_allowed",
    "require",
    "subject_from_user",
]
