"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a development default so an application can start
with no environment at all; production deployments must override the signing
secret.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (case-insensitive)
- Type validation via Pydantic
- Read once per process, immutable afterwards

Usage:
    from routeforge.core.config import settings

    secret = settings.jwt_secret
    lifetime = settings.jwt_expiration_minutes

    if settings.is_production:
        # Production-only behavior
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from routeforge.core.enums import Environment

# Fallback signing secret for local development only. Startup logs a warning
# while it is in use and production settings refuse it.
INSECURE_DEFAULT_SECRET = "routeforge-insecure-development-secret"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables (e.g. JWT_SECRET, API_PREFIX)
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=4000,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="routeforge",
        description="Application name (OpenAPI title)",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Security configuration
    jwt_secret: str = Field(
        default=INSECURE_DEFAULT_SECRET,
        description="Shared secret for bearer token signing",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_expiration_minutes: int = Field(
        default=60,
        gt=0,
        description="Issued token lifetime in minutes",
    )

    # Routing configuration
    api_prefix: str = Field(
        default="/api/v1",
        description="Conventional prefix for discovered routes",
    )
    routes_dir: str = Field(
        default="app/routes",
        description="Route module directory, relative to the working directory",
    )

    # CORS configuration
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["*"],
        description="Allowed CORS origins (comma-separated)",
    )

    # Mock server (CLI)
    mock_port: int = Field(
        default=5050,
        description="Port used by `routeforge mock`",
    )

    model_config = SettingsConfigDict(
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

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """
        Remove trailing slashes from the prefix.

        Args:
            v: Prefix string.

        Returns:
            str: Prefix without trailing slash ("" stays "").
        """
        return v.rstrip("/")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """
        Parse comma-separated CORS origins.

        Args:
            v: Comma-separated origins string or an already split list.

        Returns:
            list[str]: List of origin URLs.
        """
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @model_validator(mode="after")
    def validate_production_secret(self) -> "Settings":
        """
        Refuse the development secret in production.

        Raises:
            ValueError: If production runs with the fallback, an empty or a
                short (< 32 characters) signing secret.
        """
        if self.environment == Environment.PRODUCTION:
            if not self.jwt_secret or self.jwt_secret == INSECURE_DEFAULT_SECRET:
                raise ValueError("JWT_SECRET must be set in production")
            if len(self.jwt_secret) < 32:
                raise ValueError(
                    "JWT_SECRET must be at least 32 characters in production"
                )
        return self

    @property
    def uses_insecure_secret(self) -> bool:
        """
        Check if the development fallback secret is in use.

        Returns:
            bool: True if jwt_secret is the built-in fallback.
        """
        return self.jwt_secret == INSECURE_DEFAULT_SECRET

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


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
