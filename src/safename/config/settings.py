"""Pydantic Settings for safename configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with support for env vars and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="SAFENAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Global settings
    debug: bool = False

    # Name resolution settings
    max_filename_length: int = Field(
        default=255, ge=32, le=255, description="Maximum name length in codepoints"
    )
    disambiguation_limit: int = Field(
        default=32, ge=1, le=9999, description="Highest ' (n)' counter tried"
    )
    placeholder: str = Field(default="untitled", description="Base used for empty names")

    # MIME table settings
    mime_table: Optional[Path] = Field(default=None, description="YAML file with MIME overrides")
    use_system_mime_types: bool = False


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
