"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

AIRTABLE_REQUIRED_ENV = ("AIRTABLE_API_KEY", "AIRTABLE_BASE_ID", "AIRTABLE_TABLE_NAME")


class ConfigurationError(RuntimeError):
    """Raised when the application cannot start with the given settings."""


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (docs URLs, error details). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        storage_backend: "airtable" for the remote table, "memory" for a
            process-local store.
        airtable_api_key: Airtable personal access token.
        airtable_base_id: Id of the Airtable base.
        airtable_table_name: Name of the products table.
        airtable_api_url: Airtable REST root.
        airtable_timeout_seconds: Timeout for each Airtable call.
        rate_limit_enabled: Toggle for per-client rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
        cors_origins: Origins allowed by CORS.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Produtos API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    storage_backend: Literal["airtable", "memory"] = "airtable"

    airtable_api_key: Optional[str] = None
    airtable_base_id: Optional[str] = None
    airtable_table_name: Optional[str] = None
    airtable_api_url: str = "https://api.airtable.com/v0"
    airtable_timeout_seconds: float = 20.0

    rate_limit_enabled: bool = True
    rate_limit_default: str = "100 per 15 minutes"
    max_request_size_bytes: int = 10 * 1024 * 1024  # 10 MB

    cors_origins: list[str] = ["*"]

    def missing_airtable_settings(self) -> list[str]:
        """Return the env var names of Airtable credentials that are unset or blank."""
        values = (
            self.airtable_api_key,
            self.airtable_base_id,
            self.airtable_table_name,
        )
        return [
            name
            for name, value in zip(AIRTABLE_REQUIRED_ENV, values)
            if value is None or value.strip() == ""
        ]


settings = Settings()
