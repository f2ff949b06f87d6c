"""Configuration management for HookFlow.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HOOKFLOW_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "HookFlow"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    # Hook Sources (used by the CLI when no --module/--path is given)
    hook_modules: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Dotted module names to load hooks from",
    )
    hook_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Python files or directories to load hooks from",
    )

    # Documentation Settings
    docs_format: Literal["markdown", "html"] = "markdown"
    docs_group_by: Literal["none", "plugin"] = "none"

    @field_validator("hook_modules", "hook_paths", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: str | list[str]) -> list[str]:
        """Parse hook sources from a JSON list, a comma-separated string, or a list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
