"""Shelter data-access service."""

from petshelter.models.shelter import Shelter
from petshelter.schemas.shelter import SHELTER_ORDER_FIELDS

from .base import BaseService


class ShelterService(BaseService):
    """Service for shelter listing and CRUD."""

    model = Shelter
    model_name = "shelters"
    search_fields = ("name", "email", "description", "city")
    order_fields = SHELTER_ORDER_FIELDS
    default_order = "created_at"
