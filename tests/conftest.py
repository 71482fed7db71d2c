"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from petshelter.config.database import get_async_session_local
from petshelter.main import app
from petshelter.models import Animal, Shelter, ShelterManager, User
from petshelter.utils.security import hash_password
from tests.helpers import TEST_PASSWORD, unique_email


# Async test client
@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session():
    session_local = get_async_session_local()
    async with session_local() as session:
        yield session


@pytest.fixture
def make_user(db_session):
    """Factory creating a user with the given role."""

    async def factory(user_type: str | None = "adopter", **overrides) -> User:
        user = User(
            email=overrides.pop("email", unique_email(user_type or "norole")),
            name=overrides.pop("name", "Test User"),
            password_hash=hash_password(TEST_PASSWORD),
            user_type=user_type,
            is_active=overrides.pop("is_active", True),
            **overrides,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return factory


@pytest.fixture
def make_shelter(db_session):
    """Factory creating a shelter, optionally managed by some users."""

    async def factory(managers: tuple[User, ...] = (), **overrides) -> Shelter:
        shelter = Shelter(
            name=overrides.pop("name", "Happy Paws"),
            email=overrides.pop("email", unique_email("shelter")),
            phone=overrides.pop("phone", "+55 11 5555-0000"),
            address=overrides.pop("address", "Rua das Flores, 10"),
            city=overrides.pop("city", "Sao Paulo"),
            state=overrides.pop("state", "SP"),
            zip_code=overrides.pop("zip_code", "01000-000"),
            **overrides,
        )
        db_session.add(shelter)
        await db_session.commit()
        await db_session.refresh(shelter)

        for manager in managers:
            db_session.add(ShelterManager(shelter_id=shelter.id, user_id=manager.id))
        await db_session.commit()
        return shelter

    return factory


@pytest.fixture
def make_animal(db_session):
    """Factory creating an animal owned by a user or a shelter."""

    async def factory(owner: User | None = None, shelter: Shelter | None = None, **overrides) -> Animal:
        animal = Animal(
            user_id=owner.id if owner else None,
            shelter_id=shelter.id if shelter else None,
            name=overrides.pop("name", "Rex"),
            type=overrides.pop("type", "dog"),
            size=overrides.pop("size", "medium"),
            gender=overrides.pop("gender", "male"),
            **overrides,
        )
        db_session.add(animal)
        await db_session.commit()
        await db_session.refresh(animal)
        return animal

    return factory
