"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every setting has a safe default so the service starts with no
environment at all; the only setting most deployments touch is ``PORT``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (case-insensitive)
- Type validation via Pydantic

Usage:
    from itemflow.core.config import get_settings

    settings = get_settings()
    settings.port  # 3000 unless PORT is set

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from itemflow.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=3000,
        description="Server bind port (PORT environment variable)",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload on code changes (development only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Itemflow",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Error responses
    error_type_base_url: str = Field(
        default="about:blank",
        description="Base URI for RFC 7807 problem types (e.g., https://itemflow.local)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """
        Validate the port is a usable TCP port.

        Args:
            v: Port number.

        Returns:
            int: Validated port.

        Raises:
            ValueError: If port is not between 1 and 65535.
        """
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("error_type_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def numeric_log_level(self) -> int:
        """Return the stdlib numeric value of ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
