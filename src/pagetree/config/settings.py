"""Library settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PATH_SEPARATOR = ":"


class Settings(BaseSettings):
    """PageTree configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGETREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Paths
    path_separator: str = Field(
        default=DEFAULT_PATH_SEPARATOR,
        description="Separator placed between identifier segments of a path",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")

    @field_validator("path_separator")
    @classmethod
    def validate_path_separator(cls, v: str) -> str:
        """Separator must not be empty."""
        if not v:
            raise ValueError("Path separator must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
