"""API routers."""

from . import adoption_requests, animals, auth, shelters

__all__ = ["adoption_requests", "animals", "auth", "shelters"]
