"""Database models."""

from .adoption_request import AdoptionRequest, AdoptionStatus
from .animal import Animal, AnimalGender, AnimalSize, AnimalType
from .base import Base, TimestampMixin
from .shelter import Shelter
from .shelter_manager import ShelterManager
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Shelter",
    "ShelterManager",
    "Animal",
    "AnimalType",
    "AnimalSize",
    "AnimalGender",
    "AdoptionRequest",
    "AdoptionStatus",
]
