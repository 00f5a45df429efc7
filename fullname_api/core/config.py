"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the Lambda function and the local
tools start without any .env file.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from fullname_api.core.config import settings

    endpoint = settings.endpoint_url(api_id)
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fullname_api.core.constants import CLIENT_TIMEOUT_DEFAULT
from fullname_api.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


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

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode for the local host app",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Bind host for the locally hosted handler",
    )
    port: int = Field(
        default=8000,
        description="Bind port for the locally hosted handler",
    )

    # Application metadata
    app_name: str = Field(
        default="Full Name API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Deployment target (LocalStack API Gateway)
    localstack_url: str = Field(
        default="http://localhost:4566",
        description="LocalStack edge URL hosting the API Gateway deployment",
    )
    api_stage: str = Field(
        default="prod",
        description="API Gateway stage name",
    )
    market_id: str | None = Field(
        default=None,
        description="Optional X-Market-Id header sent by the client",
    )

    # Client behavior
    client_timeout: float = Field(
        default=CLIENT_TIMEOUT_DEFAULT,
        gt=0,
        description="HTTP client timeout in seconds",
    )
    readiness_max_attempts: int = Field(
        default=30,
        ge=1,
        description="Number of readiness probes before giving up",
    )
    readiness_interval_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Delay between readiness probes in seconds",
    )

    # Contract testing
    pact_file: str = Field(
        default="pacts/FullNameApi.Consumer-FullNameApi.Provider.json",
        description="Pact file replayed by the contract verifier",
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
            v: Log level name (any case).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("localstack_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    def endpoint_url(self, api_id: str) -> str:
        """
        Build the API Gateway invocation URL for a deployed REST API.

        Args:
            api_id: API Gateway REST API identifier.

        Returns:
            str: Invocation URL ending with a slash.
        """
        return f"{self.localstack_url}/restapis/{api_id}/{self.api_stage}/_user_request_/"

    @property
    def health_url(self) -> str:
        """
        LocalStack readiness endpoint.

        Returns:
            str: Health check URL.
        """
        return f"{self.localstack_url}/_localstack/health"

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

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
