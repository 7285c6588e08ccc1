"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Secret the service used to fall back to when none was configured
LEGACY_DEFAULT_SECRET = "fallback-secret-key"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT
    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_hours: int = Field(default=12, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # API
    environment: str = Field(default="development")
    api_prefix: str = Field(default="/api")
    cors_origins: list[str] = Field(default=["*"])
    seed_demo_data: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=4000)

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production" and self.jwt_secret == LEGACY_DEFAULT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises a pydantic ``ValidationError`` when ``JWT_SECRET`` is not set, so the
    service refuses to start without a signing secret.
    """
    return Settings()
