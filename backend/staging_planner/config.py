"""
Application Settings

Environment-driven configuration for the Staging Planner API.
Values can be overridden with STAGING_PLANNER_* variables or a .env file.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the placement service."""

    model_config = SettingsConfigDict(
        env_prefix="STAGING_PLANNER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Staging Planner API"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Gap (in room percent) required between two placements
    collision_padding: float = 2.0


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
