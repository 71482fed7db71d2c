"""Authentication dependencies for FastAPI."""

import logging
import time

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from petshelter.models.user import User
from petshelter.services.auth_service import AuthService
from petshelter.utils.exceptions import AuthenticationError
from petshelter.utils.timing import record

from .database import get_db

logger = logging.getLogger(__name__)

# Security scheme for Bearer tokens
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User | None:
    """Get current user from the bearer token, or None when absent or invalid."""
    if not credentials:
        return None

    start = time.perf_counter()
    try:
        user = await AuthService(db).verify_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.debug(f"Rejected bearer token: {e.message}", extra={"error_code": e.error_code})
        return None
    finally:
        record("auth", (time.perf_counter() - start) * 1000)

    request.state.user_id = user.id
    return user


async def get_current_active_user(
    current_user: User | None = Depends(get_current_user),
) -> User:
    """Get current active user, raise exception if not authenticated."""
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return current_user


async def get_optional_current_user(
    current_user: User | None = Depends(get_current_user),
) -> User | None:
    """Get current user if authenticated, otherwise None."""
    return current_user
