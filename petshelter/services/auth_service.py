"""Authentication service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from petshelter.models.user import User
from petshelter.schemas.auth import LoginResponse, TokenResponse
from petshelter.schemas.user import UserResponse
from petshelter.utils.exceptions import AuthenticationError, InvalidTokenError
from petshelter.utils.security import verify_password

from .jwt_service import JWTService
from .user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Service for registration, login and token verification."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.user_service = UserService(db)
        self.jwt_service = JWTService()

    async def register_user(self, email: str, name: str, password: str, user_type: str) -> User:
        """Register a new self-service user."""
        user = await self.user_service.create_user(
            email=email, name=name, password=password, user_type=user_type
        )
        logger.info(f"User registered: {user.id}", extra={"user_id": user.id, "user_type": user_type})
        return user

    async def authenticate_user(self, email: str, password: str) -> User:
        """Check credentials and return the user."""
        user = await self.user_service.get_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")

        if not user.is_active:
            raise AuthenticationError("Account is inactive")

        return user

    async def verify_access_token(self, token: str) -> User:
        """Resolve the active user behind a bearer token."""
        user_id = self.jwt_service.get_user_id_from_token(token)
        user = await self.user_service.get_by_id(user_id)

        if not user or not user.is_active:
            raise InvalidTokenError("User not found or inactive")

        return user

    def create_login_response(self, user: User) -> LoginResponse:
        """Issue an access token for ``user``."""
        access_token = self.jwt_service.create_access_token(user.id, user.email)
        return LoginResponse(
            success=True,
            message="Login successful",
            user=UserResponse.model_validate(user),
            tokens=TokenResponse(
                access_token=access_token,
                expires_in=self.jwt_service.access_token_lifetime_seconds,
            ),
        )
