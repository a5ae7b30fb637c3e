"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables prefixed with
``PASSHASH_``. Only ambient concerns live here; the bcrypt cost is a fixed
constant (see `passhash/core/constants.py`) and is not configurable.

Usage:
    from passhash.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Dev-specific behavior
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passhash.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Package settings (flat structure).

    Configuration precedence:
        1. Environment variables (PASSHASH_ENVIRONMENT, PASSHASH_LOG_LEVEL, ...)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    app_name: str = Field(
        default="passhash",
        description="Name bound to every log event",
    )

    model_config = SettingsConfigDict(
        env_prefix="PASSHASH_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
