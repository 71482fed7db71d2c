"""JWT service for token generation and validation."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from jwt.exceptions import DecodeError, ExpiredSignatureError, InvalidTokenError

from petshelter.config.settings import settings
from petshelter.utils.exceptions import InvalidTokenError as CustomInvalidTokenError
from petshelter.utils.exceptions import TokenExpiredError


class JWTService:
    """Service for JWT token operations."""

    def __init__(self):
        self.algorithm = settings.JWT_ALGORITHM
        self.secret_key = settings.JWT_SECRET_KEY
        self.access_token_expire_minutes = settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        self.issuer = settings.JWT_ISSUER
        self.audience = settings.JWT_AUDIENCE

    @property
    def access_token_lifetime_seconds(self) -> int:
        return self.access_token_expire_minutes * 60

    def create_access_token(self, user_id: str, email: str) -> str:
        """Create a JWT access token."""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=self.access_token_expire_minutes)

        payload = {
            "sub": user_id,  # Subject (user ID)
            "email": email,
            "type": "access",
            "iat": now,  # Issued at
            "exp": expire,  # Expiration time
            "iss": self.issuer,
            "aud": self.audience,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str, verify_exp: bool = True) -> Dict[str, Any]:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": verify_exp},
                audience=self.audience,
                issuer=self.issuer,
            )

        except ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")

        except (DecodeError, InvalidTokenError) as e:
            raise CustomInvalidTokenError(f"Invalid token: {e}")

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """Decode and validate an access token."""
        payload = self.decode_token(token)

        if payload.get("type") != "access":
            raise CustomInvalidTokenError("Invalid token type")

        return payload

    def get_user_id_from_token(self, token: str) -> str:
        """Extract user ID from an access token."""
        payload = self.decode_access_token(token)
        user_id = payload.get("sub")

        if not user_id:
            raise CustomInvalidTokenError("Token missing user ID")

        return user_id
