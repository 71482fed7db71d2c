"""Integration tests for adoption request routes."""

from datetime import datetime, timezone

import pytest
from fastapi import status
from httpx import AsyncClient

from petshelter.models import AdoptionRequest
from tests.helpers import API, auth_headers

pytestmark = pytest.mark.asyncio


async def file_request(client: AsyncClient, user, animal, **extra):
    return await client.post(
        f"{API}/adoption-requests/",
        json={"animal_id": animal.id, "message": "I have a big garden", "house_type": "house", **extra},
        headers=auth_headers(user),
    )


class TestAdoptionRequestCreate:
    async def test_adopter_files_request_for_themselves(self, async_client: AsyncClient, make_user, make_animal):
        adopter = await make_user("adopter")
        other = await make_user("adopter")
        animal = await make_animal(owner=await make_user("donor"))

        response = await file_request(async_client, adopter, animal, user_id=other.id)

        assert response.status_code == status.HTTP_201_CREATED
        adoption_request = response.json()["adoption_request"]
        assert adoption_request["user_id"] == adopter.id
        assert adoption_request["status"] == "pending"

    async def test_donor_cannot_file_requests(self, async_client: AsyncClient, make_user, make_animal):
        donor = await make_user("donor")
        animal = await make_animal(owner=await make_user("donor"))

        response = await file_request(async_client, donor, animal)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    async def test_unknown_animal_is_404(self, async_client: AsyncClient, make_user):
        adopter = await make_user("adopter")

        response = await async_client.post(
            f"{API}/adoption-requests/", json={"animal_id": "missing"}, headers=auth_headers(adopter)
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestAdoptionRequestAccess:
    async def test_listing_requires_authentication(self, async_client: AsyncClient):
        response = await async_client.get(f"{API}/adoption-requests/")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_adopters_only_see_their_own_requests(self, async_client: AsyncClient, make_user, make_animal):
        first = await make_user("adopter")
        second = await make_user("both")
        admin = await make_user("admin")
        animal = await make_animal(owner=await make_user("donor"))
        own = (await file_request(async_client, first, animal)).json()["adoption_request"]
        await file_request(async_client, second, animal)

        mine = await async_client.get(f"{API}/adoption-requests/", headers=auth_headers(first))
        everything = await async_client.get(f"{API}/adoption-requests/", headers=auth_headers(admin))

        assert [row["id"] for row in mine.json()["adoption_requests"]] == [own["id"]]
        assert len(everything.json()["adoption_requests"]) == 2

    async def test_own_request_is_listed_behind_newer_foreign_requests(
        self, async_client: AsyncClient, db_session, make_user, make_animal
    ):
        adopter = await make_user("adopter")
        animal = await make_animal(owner=await make_user("donor"))
        own = AdoptionRequest(
            user_id=adopter.id, animal_id=animal.id, requested_at=datetime(2025, 1, 1, tzinfo=timezone.utc)
        )
        db_session.add(own)
        for day in (2, 3, 4):
            other = await make_user("adopter")
            db_session.add(
                AdoptionRequest(
                    user_id=other.id, animal_id=animal.id, requested_at=datetime(2025, 1, day, tzinfo=timezone.utc)
                )
            )
        await db_session.commit()

        first_page = await async_client.get(
            f"{API}/adoption-requests/", params={"page": 1, "page_size": 2}, headers=auth_headers(adopter)
        )
        second_page = await async_client.get(
            f"{API}/adoption-requests/", params={"page": 2, "page_size": 2}, headers=auth_headers(adopter)
        )

        assert first_page.status_code == status.HTTP_200_OK
        assert [row["id"] for row in first_page.json()["adoption_requests"]] == [own.id]
        assert first_page.json()["pagination"] == {"page": 1, "page_size": 2, "count": 1}
        assert second_page.json()["adoption_requests"] == []

    async def test_asking_for_another_users_requests_returns_nothing(
        self, async_client: AsyncClient, make_user, make_animal
    ):
        adopter = await make_user("adopter")
        other = await make_user("adopter")
        animal = await make_animal(owner=await make_user("donor"))
        await file_request(async_client, other, animal)

        response = await async_client.get(
            f"{API}/adoption-requests/", params={"user_id": other.id}, headers=auth_headers(adopter)
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["adoption_requests"] == []

    async def test_reading_someone_elses_request_is_forbidden(
        self, async_client: AsyncClient, make_user, make_animal
    ):
        owner = await make_user("adopter")
        intruder = await make_user("adopter")
        animal = await make_animal(owner=await make_user("donor"))
        created = (await file_request(async_client, owner, animal)).json()["adoption_request"]

        own = await async_client.get(f"{API}/adoption-requests/{created['id']}", headers=auth_headers(owner))
        foreign = await async_client.get(
            f"{API}/adoption-requests/{created['id']}", headers=auth_headers(intruder)
        )

        assert own.status_code == status.HTTP_200_OK
        assert foreign.status_code == status.HTTP_403_FORBIDDEN

    async def test_owner_updates_and_deletes_request(self, async_client: AsyncClient, make_user, make_animal):
        adopter = await make_user("adopter")
        intruder = await make_user("both")
        animal = await make_animal(owner=await make_user("donor"))
        created = (await file_request(async_client, adopter, animal)).json()["adoption_request"]
        url = f"{API}/adoption-requests/{created['id']}"

        updated = await async_client.patch(url, json={"has_children": True}, headers=auth_headers(adopter))
        assert updated.status_code == status.HTTP_200_OK
        assert updated.json()["adoption_request"]["has_children"] is True

        refused = await async_client.delete(url, headers=auth_headers(intruder))
        assert refused.status_code == status.HTTP_403_FORBIDDEN

        deleted = await async_client.delete(url, headers=auth_headers(adopter))
        assert deleted.status_code == status.HTTP_200_OK
        assert (await async_client.get(url, headers=auth_headers(adopter))).status_code == status.HTTP_404_NOT_FOUND

    async def test_list_filters_by_status(self, async_client: AsyncClient, make_user, make_animal):
        admin = await make_user("admin")
        adopter = await make_user("adopter")
        animal = await make_animal(owner=await make_user("donor"))
        approved = (await file_request(async_client, adopter, animal)).json()["adoption_request"]
        await file_request(async_client, adopter, animal)
        await async_client.patch(
            f"{API}/adoption-requests/{approved['id']}", json={"status": "approved"}, headers=auth_headers(admin)
        )

        response = await async_client.get(
            f"{API}/adoption-requests/", params={"status": "approved"}, headers=auth_headers(adopter)
        )

        assert [row["id"] for row in response.json()["adoption_requests"]] == [approved["id"]]
