"""Integration tests for registration, login and the current-user endpoint."""

import pytest
from fastapi import status
from httpx import AsyncClient

from tests.helpers import API, TEST_PASSWORD, auth_headers, unique_email

pytestmark = pytest.mark.asyncio


class TestRegistration:
    async def test_register_self_service_roles(self, async_client: AsyncClient):
        for user_type in ("adopter", "donor", "both"):
            response = await async_client.post(
                f"{API}/auth/register",
                json={
                    "email": unique_email(user_type),
                    "name": "New User",
                    "password": TEST_PASSWORD,
                    "user_type": user_type,
                },
            )

            assert response.status_code == status.HTTP_201_CREATED
            assert response.json()["user"]["user_type"] == user_type

    @pytest.mark.parametrize("user_type", ["admin", "shelterManager", "superuser"])
    async def test_privileged_roles_cannot_self_register(self, async_client: AsyncClient, user_type):
        response = await async_client.post(
            f"{API}/auth/register",
            json={"email": unique_email(), "name": "Sneaky", "password": TEST_PASSWORD, "user_type": user_type},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_weak_password_rejected(self, async_client: AsyncClient):
        response = await async_client.post(
            f"{API}/auth/register",
            json={"email": unique_email(), "name": "Weak", "password": "password"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_duplicate_email_conflicts(self, async_client: AsyncClient, make_user):
        user = await make_user("adopter")

        response = await async_client.post(
            f"{API}/auth/register",
            json={"email": user.email, "name": "Again", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error_code"] == "EMAIL_EXISTS"


class TestLogin:
    async def test_login_returns_bearer_token(self, async_client: AsyncClient, make_user):
        user = await make_user("donor")

        response = await async_client.post(
            f"{API}/auth/login", json={"email": user.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_200_OK
        tokens = response.json()["tokens"]
        assert tokens["token_type"] == "bearer"

        me = await async_client.get(
            f"{API}/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"}
        )
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["user"]["id"] == user.id

    async def test_wrong_password_is_unauthorized(self, async_client: AsyncClient, make_user):
        user = await make_user("donor")

        response = await async_client.post(
            f"{API}/auth/login", json={"email": user.email, "password": "WrongPassword1"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["success"] is False

    async def test_inactive_user_cannot_login(self, async_client: AsyncClient, make_user):
        user = await make_user("adopter", is_active=False)

        response = await async_client.post(
            f"{API}/auth/login", json={"email": user.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestMe:
    async def test_me_reports_resolved_permissions(self, async_client: AsyncClient, make_user):
        user = await make_user("adopter")

        response = await async_client.get(f"{API}/auth/me", headers=auth_headers(user))

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["role"] == "adopter"
        assert body["permissions"]["animals"] == {
            "create": False,
            "delete": False,
            "read": True,
            "update": False,
        }
        assert body["permissions"]["adoptionRequests"]["create"] is True
        assert body["permissions"]["adoptionRequests"]["update"] == f"owned by user {user.id}"

    async def test_unknown_role_falls_back_to_adopter(self, async_client: AsyncClient, make_user):
        user = await make_user("superuser")

        response = await async_client.get(f"{API}/auth/me", headers=auth_headers(user))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["role"] == "adopter"

    async def test_user_without_role_has_no_permissions(self, async_client: AsyncClient, make_user):
        user = await make_user(None)

        response = await async_client.get(f"{API}/auth/me", headers=auth_headers(user))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["role"] is None
        assert response.json()["permissions"] is None

    async def test_me_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/auth/me")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

        response = await async_client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"
