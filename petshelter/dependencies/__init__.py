"""FastAPI dependencies."""

from .auth import get_current_active_user, get_current_user, get_optional_current_user
from .database import get_db
from .permissions import get_permission_checker, get_permission_resolver, require_permission

__all__ = [
    "get_current_user",
    "get_current_active_user",
    "get_optional_current_user",
    "get_db",
    "get_permission_checker",
    "get_permission_resolver",
    "require_permission",
]
