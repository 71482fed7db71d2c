"""User data-access service."""

from sqlalchemy import select

from petshelter.models.user import User
from petshelter.utils.exceptions import EmailAlreadyExistsError
from petshelter.utils.security import hash_password

from .base import BaseService


class UserService(BaseService):
    """Service for user accounts."""

    model = User
    model_name = "users"

    async def get_by_email(self, email: str) -> User | None:
        async with self._operation("getByEmail"):
            result = await self.db.execute(select(User).where(User.email == email.lower()))
            return result.scalar_one_or_none()

    async def create_user(
        self,
        email: str,
        name: str,
        password: str,
        user_type: str | None = None,
    ) -> User:
        """Create a user account with a hashed password."""
        if await self.get_by_email(email):
            raise EmailAlreadyExistsError()

        return await self.create(
            email=email.lower(),
            name=name,
            password_hash=hash_password(password),
            user_type=user_type,
            is_active=True,
        )
