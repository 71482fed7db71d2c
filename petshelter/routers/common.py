"""Helpers shared by the resource routers."""

import logging

from petshelter.services.base import BaseService
from petshelter.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


async def get_or_404(service: BaseService, resource_id: str, resource: str):
    """Fetch a row by id or raise NotFoundError."""
    instance = await service.get_by_id(resource_id)
    if instance is None:
        raise NotFoundError(resource, resource_id)
    return instance


def log_operation(operation: str, resource_type: str, user_id: str, **context) -> None:
    """Log mutations for auditing."""
    logger.info(
        f"User {user_id} performed {operation} on {resource_type}",
        extra={
            "operation": operation,
            "resource_type": resource_type,
            "user_id": user_id,
            **context,
        },
    )
