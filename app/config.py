# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SPREADSHEET_ID)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup. A missing
# SPREADSHEET_ID raises ConfigurationError and the service does not start.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Google Sheets Configuration
    # -------------------------------------------------------------------------
    # SPREADSHEET_ID is required - app won't start without it

    SPREADSHEET_ID: str = Field(
        ...,
        min_length=1,
        description="Google Sheets spreadsheet ID (from the sheet URL)"
    )

    FACULTY_SHEET: str = Field(
        default="Faculty",
        description="Sheet holding the roster (Name, Department, Subject, Mobile)"
    )

    REVIEWS_SHEET: str = Field(
        default="Reviews",
        description="Sheet holding review rows"
    )

    GOOGLE_CREDENTIALS_FILE: str = Field(
        default="google-sheets-key.json",
        description="Path to the service account JSON key"
    )

    SHEETS_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Socket timeout for each Sheets API call"
    )

    # -------------------------------------------------------------------------
    # Cache & Reviews
    # -------------------------------------------------------------------------

    CACHE_DURATION_SECONDS: int = Field(
        default=300,
        ge=0,
        description="How long the faculty roster is served from memory"
    )

    REVIEW_TIMEZONE: str = Field(
        default="Asia/Kolkata",
        description="Time zone of the timestamp stored with each review"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    REVIEW_PORT: int = Field(
        default=3001,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    STATIC_DIR: str = Field(
        default="public",
        description="Directory with the review form front-end (optional)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.

    Raises:
        ConfigurationError: If a required setting is missing or invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid or missing settings: {', '.join(missing)}. "
            "Please check your .env file"
        ) from e


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
