"""FALLIBLE_* environment configuration.

Two groups, each readable on its own or through the root FallibleSettings:

    FALLIBLE_DEBUG=true                              force DEBUG logging
    FALLIBLE_LOG_LEVEL=debug                         case-insensitive
    FALLIBLE_LOG_FORMAT=console|json|none
    FALLIBLE_COLLECTION_MIN_CAPACITY=4               buffer size for unsized sources
    FALLIBLE_COLLECTION_FAILURE_CAPACITY_DIVISOR=4   failure buffer = count // divisor

Example:
    >>> from fallible.foundation.config import get_settings
    >>> get_settings().collection.failure_capacity_divisor
    4
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Threshold and output format of fallible's own log entries."""

    model_config = SettingsConfigDict(env_prefix="FALLIBLE_LOG_", extra="ignore")

    level: LevelName = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class CollectionSettings(BaseSettings):
    """Pre-sizing hints for partition buffers. Never change results."""

    model_config = SettingsConfigDict(env_prefix="FALLIBLE_COLLECTION_", extra="ignore")

    min_capacity: PositiveInt = Field(default=4, description="Initial capacity when the source length is unknown")
    failure_capacity_divisor: PositiveInt = Field(
        default=4,
        description="Failure buffer starts at count // divisor; failures are assumed rare",
    )


class FallibleSettings(BaseSettings):
    """Root settings; nested groups may also be set as FALLIBLE_LOGGING__LEVEL etc."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Log everything at DEBUG regardless of level")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    collection: CollectionSettings = Field(default_factory=CollectionSettings)

    @computed_field
    @property
    def effective_log_level(self) -> LevelName:
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Process-wide settings, read from the environment once."""
    return FallibleSettings()


def clear_settings_cache() -> None:
    """Make the next get_settings() re-read the environment."""
    get_settings.cache_clear()
