"""Application configuration from environment variables.

This module provides the AppSettings class which loads immutable service
configuration from environment variables at startup (bind address, logging,
environment, CORS origins, default locale).

Request schemas and the locale catalogue are code, not configuration; they are
fixed at import time and never read from the environment.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from myclinic.constants import ENV_DEVELOPMENT, ENV_PRODUCTION, WILDCARD_ORIGIN
from myclinic.i18n.locales import DEFAULT_LOCALE, is_supported


class AppSettings(BaseSettings):
    """Static configuration loaded from environment variables.

    All settings can be overridden via environment variables with the
    MYCLINIC_ prefix. For example, api_host can be set via MYCLINIC_API_HOST.

    Attributes:
        api_host: API server bind address
        api_port: API server port
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Deployment environment (development, staging, production)
        debug: Enable debug mode (stack traces in error responses)
        cors_origins: List of allowed CORS origins
        default_locale: Locale used when a request carries no supported locale
    """

    model_config = SettingsConfigDict(
        env_prefix="MYCLINIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    log_level: str = Field(default="INFO")

    environment: str = Field(default=ENV_DEVELOPMENT)
    debug: bool = Field(default=False)

    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"]
    )

    default_locale: str = Field(default=DEFAULT_LOCALE.value)

    @field_validator("default_locale")
    @classmethod
    def _check_default_locale(cls, value: str) -> str:
        if not is_supported(value):
            raise ValueError(f"Unsupported default locale: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == ENV_PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == ENV_DEVELOPMENT

    def validate_production_config(self) -> list[str]:
        """Validate configuration for production deployment.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.debug:
            errors.append("DEBUG should be False in production")

        if not self.cors_origins or WILDCARD_ORIGIN in self.cors_origins:
            errors.append("CORS origins should be explicit in production")

        return errors


_app_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get singleton instance of static settings.

    Settings are loaded once and cached for application lifetime.

    Returns:
        AppSettings instance
    """
    global _app_settings

    if _app_settings is None:
        _app_settings = AppSettings()

    return _app_settings
