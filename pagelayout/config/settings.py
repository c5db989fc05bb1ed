"""
Application Settings
===================

Library settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Page Layout DSL", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Page Configuration
    default_page_name: str = Field(
        default="crossbeams", description="DOM id/name prefix used when a page has no name"
    )

    # Caption Configuration
    fold_up_caption: str = Field(default="Details", description="Default fold-up caption")
    text_toggle_caption: str = Field(
        default="Show/Hide Text", description="Default caption of a text toggle button"
    )
    submit_caption: str = Field(default="Submit", description="Default form submit caption")
    submit_disable_caption: str = Field(
        default="Submitting", description="Submit caption while a form is being submitted"
    )
    select_prompt: str = Field(
        default="Select a value", description="Prompt shown when a select prompt is requested"
    )

    # Grid Configuration
    grid_height: int = Field(default=20, gt=0, description="Default grid height in em")
    grid_theme: Optional[str] = Field(
        default="ag-theme-balham", description="CSS theme class applied to grid containers"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="PAGELAYOUT_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
