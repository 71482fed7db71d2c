"""Animal data-access service."""

from petshelter.models.animal import Animal
from petshelter.schemas.animal import ANIMAL_ORDER_FIELDS

from .base import BaseService


class AnimalService(BaseService):
    """Service for animal listing and CRUD."""

    model = Animal
    model_name = "animals"
    search_fields = ("name", "breed", "description", "color", "health_info")
    order_fields = ANIMAL_ORDER_FIELDS
    default_order = "created_at"
