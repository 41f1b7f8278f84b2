"""Configuration management using pydantic-settings."""

from .settings import (
    CollectionSettings,
    FallibleSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CollectionSettings",
    "FallibleSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
