"""Shared helpers for API tests."""

import uuid

from petshelter.config.settings import settings
from petshelter.models import User
from petshelter.services.jwt_service import JWTService

API = settings.API_PREFIX
TEST_PASSWORD = "TestPassword123"


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}@example.com"


def auth_headers(user: User) -> dict[str, str]:
    token = JWTService().create_access_token(user.id, user.email)
    return {"Authorization": f"Bearer {token}"}
