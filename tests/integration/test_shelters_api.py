"""Integration tests for shelter routes and manager assignments."""

import pytest
from fastapi import status
from httpx import AsyncClient

from tests.helpers import API, auth_headers, unique_email

pytestmark = pytest.mark.asyncio


def shelter_payload(**overrides):
    return {
        "name": "Safe Haven",
        "email": unique_email("haven"),
        "phone": "+55 21 4444-0000",
        "address": "Av. Atlantica, 100",
        "city": "Rio de Janeiro",
        "state": "rj",
        "zip_code": "22000-000",
        **overrides,
    }


class TestShelterCrud:
    async def test_listing_is_public(self, async_client: AsyncClient, make_shelter):
        await make_shelter(city="Curitiba", state="PR")
        await make_shelter(city="Recife", state="PE")

        response = await async_client.get(f"{API}/shelters/", params={"state": "PR"})

        assert response.status_code == status.HTTP_200_OK
        assert [shelter["city"] for shelter in response.json()["shelters"]] == ["Curitiba"]

    async def test_only_admin_creates_shelters(self, async_client: AsyncClient, make_user):
        admin = await make_user("admin")
        manager = await make_user("shelterManager")

        created = await async_client.post(f"{API}/shelters/", json=shelter_payload(), headers=auth_headers(admin))
        refused = await async_client.post(
            f"{API}/shelters/", json=shelter_payload(), headers=auth_headers(manager)
        )

        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["shelter"]["state"] == "RJ"
        assert refused.status_code == status.HTTP_403_FORBIDDEN

    async def test_invalid_email_is_rejected(self, async_client: AsyncClient, make_user):
        admin = await make_user("admin")

        response = await async_client.post(
            f"{API}/shelters/", json=shelter_payload(email="not-an-email"), headers=auth_headers(admin)
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_duplicate_email_is_a_conflict(self, async_client: AsyncClient, make_user, make_shelter):
        admin = await make_user("admin")
        existing = await make_shelter()

        response = await async_client.post(
            f"{API}/shelters/", json=shelter_payload(email=existing.email), headers=auth_headers(admin)
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error_code"] == "DUPLICATE_RESOURCE"

    async def test_manager_updates_only_managed_shelter(self, async_client: AsyncClient, make_user, make_shelter):
        manager = await make_user("shelterManager")
        managed = await make_shelter(managers=(manager,))
        other = await make_shelter()

        allowed = await async_client.patch(
            f"{API}/shelters/{managed.id}", json={"description": "Open on weekends"}, headers=auth_headers(manager)
        )
        denied = await async_client.patch(
            f"{API}/shelters/{other.id}", json={"description": "Hijacked"}, headers=auth_headers(manager)
        )

        assert allowed.status_code == status.HTTP_200_OK
        assert allowed.json()["shelter"]["description"] == "Open on weekends"
        assert denied.status_code == status.HTTP_403_FORBIDDEN

    async def test_only_admin_deletes_shelters(
        self, async_client: AsyncClient, make_user, make_shelter, make_animal
    ):
        admin = await make_user("admin")
        manager = await make_user("shelterManager")
        shelter = await make_shelter(managers=(manager,))
        animal = await make_animal(shelter=shelter)

        refused = await async_client.delete(f"{API}/shelters/{shelter.id}", headers=auth_headers(manager))
        deleted = await async_client.delete(f"{API}/shelters/{shelter.id}", headers=auth_headers(admin))

        assert refused.status_code == status.HTTP_403_FORBIDDEN
        assert deleted.status_code == status.HTTP_200_OK
        assert (await async_client.get(f"{API}/animals/{animal.id}")).status_code == status.HTTP_404_NOT_FOUND


class TestShelterManagers:
    async def test_admin_assigns_manager_who_gains_access(
        self, async_client: AsyncClient, make_user, make_shelter
    ):
        admin = await make_user("admin")
        manager = await make_user("shelterManager")
        shelter = await make_shelter()
        patch_url = f"{API}/shelters/{shelter.id}"

        before = await async_client.patch(patch_url, json={"phone": "123"}, headers=auth_headers(manager))
        assert before.status_code == status.HTTP_403_FORBIDDEN

        added = await async_client.post(
            f"{API}/shelters/{shelter.id}/managers", json={"user_id": manager.id}, headers=auth_headers(admin)
        )
        assert added.status_code == status.HTTP_201_CREATED
        assert added.json()["user_ids"] == [manager.id]

        after = await async_client.patch(patch_url, json={"phone": "123"}, headers=auth_headers(manager))
        assert after.status_code == status.HTTP_200_OK

    async def test_duplicate_assignment_conflicts(self, async_client: AsyncClient, make_user, make_shelter):
        admin = await make_user("admin")
        manager = await make_user("shelterManager")
        shelter = await make_shelter(managers=(manager,))

        response = await async_client.post(
            f"{API}/shelters/{shelter.id}/managers", json={"user_id": manager.id}, headers=auth_headers(admin)
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    async def test_assigning_unknown_user_is_404(self, async_client: AsyncClient, make_user, make_shelter):
        admin = await make_user("admin")
        shelter = await make_shelter()

        response = await async_client.post(
            f"{API}/shelters/{shelter.id}/managers", json={"user_id": "nobody"}, headers=auth_headers(admin)
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_manager_listing_requires_update_rights(self, async_client: AsyncClient, make_user, make_shelter):
        manager = await make_user("shelterManager")
        outsider = await make_user("shelterManager")
        shelter = await make_shelter(managers=(manager,))
        url = f"{API}/shelters/{shelter.id}/managers"

        listed = await async_client.get(url, headers=auth_headers(manager))
        refused = await async_client.get(url, headers=auth_headers(outsider))

        assert listed.json()["user_ids"] == [manager.id]
        assert refused.status_code == status.HTTP_403_FORBIDDEN

    async def test_removing_manager_revokes_access(self, async_client: AsyncClient, make_user, make_shelter):
        admin = await make_user("admin")
        manager = await make_user("shelterManager")
        shelter = await make_shelter(managers=(manager,))

        removed = await async_client.delete(
            f"{API}/shelters/{shelter.id}/managers/{manager.id}", headers=auth_headers(admin)
        )
        missing = await async_client.delete(
            f"{API}/shelters/{shelter.id}/managers/{manager.id}", headers=auth_headers(admin)
        )
        after = await async_client.patch(
            f"{API}/shelters/{shelter.id}", json={"phone": "123"}, headers=auth_headers(manager)
        )

        assert removed.status_code == status.HTTP_200_OK
        assert missing.status_code == status.HTTP_404_NOT_FOUND
        assert after.status_code == status.HTTP_403_FORBIDDEN
