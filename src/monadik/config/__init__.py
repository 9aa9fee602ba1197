"""Configuration management using pydantic-settings."""

from .settings import (
    LoggingSettings,
    MonadikSettings,
    TrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "MonadikSettings",
    "TrySettings",
    "clear_settings_cache",
    "get_settings",
]
