"""Adoption request data-access service."""

from petshelter.models.adoption_request import AdoptionRequest
from petshelter.schemas.adoption_request import ADOPTION_REQUEST_ORDER_FIELDS

from .base import BaseService


class AdoptionRequestService(BaseService):
    """Service for adoption request listing and CRUD."""

    model = AdoptionRequest
    model_name = "adoptionRequests"
    search_fields = ("message", "feedback", "house_type")
    order_fields = ADOPTION_REQUEST_ORDER_FIELDS
    default_order = "requested_at"
