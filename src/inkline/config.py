"""Configuration management for Inkline."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Style properties that are not inherited from the parent element.
    # Known to be incomplete, see http://www.w3.org/TR/CSS21/propidx.html
    non_inherited_styles: set[str] = Field(
        default={"background-color", "underline"},
        alias="INKLINE_NON_INHERITED_STYLES",
    )

    # white-space values under which whitespace text is always rendered
    whitespace_preserve_values: set[str] = Field(
        default={"pre", "pre-wrap", "-moz-pre-wrap"},
        alias="INKLINE_WHITESPACE_PRESERVE_VALUES",
    )

    log_level: str = Field(
        default="WARNING",
        alias="INKLINE_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
