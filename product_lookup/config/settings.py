"""
==============================================================================
Lookup Settings Module
==============================================================================

Configuration for the product lookup library using Pydantic Settings.

The host application normally calls ``get_settings()`` once and passes the
values it needs (catalog file, duplicate policy) into the lookup service.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with PRODUCT_LOOKUP_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


DUPLICATE_POLICIES = ("overwrite", "warn", "reject")


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log lines
        app_env: Environment mode (development/staging/production)
        debug: Enable debug logging
        log_level: Log level used when debug is off
        catalog_file: Path to the catalog JSON document
        duplicate_policy: What to do when two products share a key or id

    Example:
        >>> settings = Settings()
        >>> settings.duplicate_policy
        'overwrite'
    """

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_LOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Lookup",
        description="Display name used in log lines"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Log level used when debug is off"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    catalog_file: str = Field(
        default="data/catalog.json",
        description="Path to the catalog JSON document"
    )

    duplicate_policy: str = Field(
        default="overwrite",
        description="Collision handling on load: overwrite, warn, reject"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name, defaulting unknown values."""
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        supported = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

        if value.upper() not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return value.upper()

    @field_validator("duplicate_policy")
    @classmethod
    def validate_duplicate_policy(cls, value: str) -> str:
        """
        Validate the collision policy.

        Raises:
            ValueError: If the policy is not one of DUPLICATE_POLICIES
        """
        normalized = value.lower().strip()

        if normalized not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Unsupported duplicate policy: {value}. "
                f"Supported: {', '.join(DUPLICATE_POLICIES)}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def catalog_path(self) -> Path:
        """Get the catalog file as a Path object."""
        return Path(self.catalog_file)

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"duplicate_policy={self.duplicate_policy!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
