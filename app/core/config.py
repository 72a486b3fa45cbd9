"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env)
- Centralizes config values (port, upstream API key, upload dir, cache window)
- Validates configuration on startup
- Environment-specific settings
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Host interface for the uvicorn entrypoint"
    )
    PORT: int = Field(
        default=4000,
        description="Port for the uvicorn entrypoint"
    )

    # Realtor (RapidAPI) upstream
    REALTOR_API_KEY: Optional[str] = Field(
        default=None,
        description="RapidAPI key for the Realtor listings API"
    )
    REALTOR_RAPIDAPI_KEY: Optional[str] = Field(
        default=None,
        description="Alternative name for the RapidAPI key"
    )
    REALTOR_BASE_URL: str = Field(
        default="https://realtor.p.rapidapi.com",
        description="Realtor API base URL"
    )
    REALTOR_API_HOST: str = Field(
        default="realtor.p.rapidapi.com",
        description="Value sent as X-RapidAPI-Host"
    )
    REALTOR_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Upstream request timeout in seconds"
    )

    # Listings
    LISTINGS_CACHE_TTL_SECONDS: int = Field(
        default=600,
        description="Freshness window for the default listings query"
    )
    LISTINGS_DEFAULT_LIMIT: int = Field(
        default=12,
        description="Number of listings requested from upstream"
    )

    # Uploads
    UPLOADS_DIR: str = Field(
        default="uploads",
        description="Directory where uploaded documents are written"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @property
    def realtor_api_key(self) -> str:
        """First non-empty of REALTOR_API_KEY and REALTOR_RAPIDAPI_KEY."""
        return self.REALTOR_API_KEY or self.REALTOR_RAPIDAPI_KEY or ""

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
    )


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.

    Args:
        config: Settings to check, defaults to the global instance
    """
    config = config or settings
    errors = []

    if config.LISTINGS_CACHE_TTL_SECONDS < 0:
        errors.append("LISTINGS_CACHE_TTL_SECONDS must not be negative")

    if config.LISTINGS_DEFAULT_LIMIT <= 0:
        errors.append("LISTINGS_DEFAULT_LIMIT must be positive")

    if not config.realtor_api_key:
        if config.is_production:
            errors.append("REALTOR_API_KEY or REALTOR_RAPIDAPI_KEY is required in production")
        else:
            logging.getLogger("closied.config").warning(
                "No Realtor API key configured; upstream listings calls will be rejected"
            )

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
