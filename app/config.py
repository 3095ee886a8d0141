# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Accepted LOG_LEVEL values mapped to logging levels
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default, so the service starts with an empty
    environment. All settings are accessed via the global `settings`
    instance or app.state.settings.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=9090,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="User API",
        description="Service name shown in docs and the root endpoint"
    )

    APP_VERSION: str = Field(
        default="1.0.0",
        description="Version reported by the health check"
    )

    # Anything other than "production" runs in development logging mode
    APP_ENV: str = Field(
        default="development",
        description="Current environment (development, staging, production)"
    )

    LOG_LEVEL: str = Field(
        default="info",
        description="Log level: debug, info, warning, error, critical"
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    DATA_DIR: str = Field(
        default="/app/data",
        description="Directory for per-user JSON mirror files"
    )

    STATIC_DIR: str = Field(
        default="./static",
        description="Directory served at /static (skipped if missing)"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    # Comma-separated string that gets parsed
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Placeholders (not used yet)
    # -------------------------------------------------------------------------

    DATABASE_URL: str | None = Field(
        default=None,
        description="Database connection URL (reserved)"
    )

    REDIS_URL: str | None = Field(
        default=None,
        description="Redis connection URL (reserved)"
    )

    JWT_SECRET: str | None = Field(
        default=None,
        description="Secret for signing tokens (reserved)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables fall back to defaults
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """
        Lowercase the level and accept "warn" as an alias for "warning".
        """
        level = value.strip().lower()
        if level == "warn":
            level = "warning"
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{value}'. Use one of: {', '.join(LOG_LEVELS)}"
            )
        return level

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level_value(self) -> int:
        """LOG_LEVEL as a logging module constant."""
        return LOG_LEVELS[self.LOG_LEVEL]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
