"""Application configuration using Pydantic settings."""

from pydantic import AnyHttpUrl, Field, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # API Configuration
    API_TITLE: str = "Pet Shelter Adoption API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Animal adoption and shelter management service"
    API_PREFIX: str = "/api/v1"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    TESTING: bool = False

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./petshelter.db", description="Async SQLAlchemy database URL"
    )
    DATABASE_ECHO: bool = False
    DATABASE_AUTO_CREATE: bool = False

    # JWT Configuration
    JWT_SECRET_KEY: str = Field(
        default="dev-jwt-secret-key-super-long-for-local-development-only",
        min_length=32,
        description="Secret key for JWT tokens",
    )
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    JWT_ISSUER: str = "petshelter"
    JWT_AUDIENCE: str = "petshelter-api"

    # CORS
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]
    ALLOWED_METHODS: list[str] = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
    ALLOWED_HEADERS: list[str] = ["*"]

    # Monitoring
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_THRESHOLD: float = 2.0

    # Permissions
    PERMISSIONS_STRICT_ROLES: bool = False

    @validator("ENVIRONMENT")
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed = ["development", "staging", "production", "test"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        """Validate log level name."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @validator("ALLOWED_ORIGINS")
    def validate_origins(cls, v):
        """Validate CORS origins."""
        validated_origins = []
        for origin in v:
            if origin == "*":
                validated_origins.append(origin)
            else:
                try:
                    AnyHttpUrl(origin)
                    validated_origins.append(origin)
                except Exception:
                    raise ValueError(f"Invalid origin URL: {origin}")
        return validated_origins

    class Config:
        """Pydantic config."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Global settings instance
settings = Settings()
