"""
Configuration for locale_registry

Settings are read from environment variables prefixed with
``LOCALE_REGISTRY_`` and from an optional ``.env`` file:

    LOCALE_REGISTRY_FILENAME_PREFIX=active
    LOCALE_REGISTRY_DEFAULT_LANGUAGE=en
    LOCALE_REGISTRY_LOCALES_DIR=./locales
    LOCALE_REGISTRY_INITIAL_LOCALE=English(US)
    LOCALE_REGISTRY_LOG_LEVEL=DEBUG
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocaleSettings(BaseSettings):
    """Locale registry settings"""

    model_config = SettingsConfigDict(
        env_prefix="LOCALE_REGISTRY_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    filename_prefix: str = Field(
        default="active",
        description="Literal prefix of locale files: <prefix>.<tag>.toml"
    )
    default_language: str = Field(
        default="en",
        description="Language tag used when a message is missing from the active locale"
    )
    locales_dir: Optional[Path] = Field(
        default=None,
        description="Directory scanned for locale files at startup"
    )
    initial_locale: Optional[str] = Field(
        default=None,
        description="Tag or display name selected after loading locales_dir"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the locale_registry logger"
    )

    @field_validator("filename_prefix")
    @classmethod
    def validate_filename_prefix(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("filename_prefix must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("initial_locale", mode="before")
    @classmethod
    def blank_initial_locale(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


settings = LocaleSettings()


def get_settings() -> LocaleSettings:
    """
    Get the global settings instance

    Returns:
        LocaleSettings: The global settings instance
    """
    return settings


def reload_settings() -> LocaleSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        LocaleSettings: New settings instance with reloaded values
    """
    global settings
    settings = LocaleSettings()
    return settings
