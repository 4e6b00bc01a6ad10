"""
Application Configuration

Uses pydantic-settings for environment variable loading with validation.
All configuration is centralized here for easy management.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Admin toolkit settings loaded from environment variables.

    Environment variables can be set directly or via .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SPACES_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Runtime environment"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # ==========================================================================
    # Backend API
    # ==========================================================================
    api_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the platform serving /api/... routes"
    )

    api_token: str | None = Field(
        default=None,
        description="Bearer token forwarded on every request (session handled externally)"
    )

    request_timeout_seconds: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (None = no timeout configured)"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level for the spaces_admin logger"
    )

    # ==========================================================================
    # Files
    # ==========================================================================
    export_directory: str = Field(
        default=".",
        description="Directory where branding exports are written"
    )

    endpoint_tests_output: str = Field(
        default="tests/generated/test_endpoints_generated.py",
        description="Default output path of the generated endpoint smoke tests"
    )

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @computed_field
    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def export_path(self, filename: str) -> Path:
        """Resolve a file name inside the export directory, creating it if needed."""
        directory = Path(self.export_directory)
        directory.mkdir(parents=True, exist_ok=True)
        return directory / filename


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
