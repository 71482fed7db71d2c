"""Application services."""

from .adoption_request_service import AdoptionRequestService
from .animal_service import AnimalService
from .auth_service import AuthService
from .jwt_service import JWTService
from .shelter_manager_service import ShelterManagerService
from .shelter_service import ShelterService
from .user_service import UserService

__all__ = [
    "AdoptionRequestService",
    "AnimalService",
    "AuthService",
    "JWTService",
    "ShelterManagerService",
    "ShelterService",
    "UserService",
]
