"""Service dependency injection."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petshelter.dependencies.database import get_db
from petshelter.services.adoption_request_service import AdoptionRequestService
from petshelter.services.animal_service import AnimalService
from petshelter.services.auth_service import AuthService
from petshelter.services.shelter_manager_service import ShelterManagerService
from petshelter.services.shelter_service import ShelterService
from petshelter.services.user_service import UserService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[AuthService, None]:
    """Get AuthService instance."""
    yield AuthService(db)


async def get_user_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[UserService, None]:
    """Get UserService instance."""
    yield UserService(db)


async def get_animal_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[AnimalService, None]:
    """Get AnimalService instance."""
    yield AnimalService(db)


async def get_adoption_request_service(
    db: AsyncSession = Depends(get_db),
) -> AsyncGenerator[AdoptionRequestService, None]:
    """Get AdoptionRequestService instance."""
    yield AdoptionRequestService(db)


async def get_shelter_service(db: AsyncSession = Depends(get_db)) -> AsyncGenerator[ShelterService, None]:
    """Get ShelterService instance."""
    yield ShelterService(db)


async def get_shelter_manager_service(
    db: AsyncSession = Depends(get_db),
) -> AsyncGenerator[ShelterManagerService, None]:
    """Get ShelterManagerService instance."""
    yield ShelterManagerService(db)
