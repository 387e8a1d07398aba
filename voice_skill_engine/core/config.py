"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SKILL_NAME: str = Field(default="Hello World")
    SKILL_APPLICATION_ID: str | None = Field(default=None)
    SKILL_LOG_LEVEL: str = Field(default="info")
    SKILL_LOG_DIR: Path | None = Field(default=None)
    SKILL_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    HEALTHCHECK_AUTH_ENABLED: bool = Field(default=True)
    REPROMPT_TEXT: str = Field(default="What would you like to do?")


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
