"""Environment-based configuration using pydantic-settings.

Example:
    >>> from monadik.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.try_.log_captures
    True

    # Or with environment variables:
    # MONADIK_LOG_LEVEL=DEBUG
    # MONADIK_TRY_INCLUDE_TRACEBACK=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONADIK_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors; None auto-detects a tty")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class TrySettings(BaseSettings):
    """Behavior of the Try capture boundary."""

    model_config = SettingsConfigDict(
        env_prefix="MONADIK_TRY_",
        extra="ignore",
    )

    log_captures: bool = Field(default=True, description="Log each captured exception at DEBUG")
    include_traceback: bool = Field(default=False, description="Attach tracebacks to FailureInfo")


class MonadikSettings(BaseSettings):
    """Root settings, loaded from MONADIK_ environment variables and .env files.

    Example environment variables:
        MONADIK_DEBUG=true
        MONADIK_LOG_LEVEL=DEBUG
        MONADIK_LOG_FORMAT=json
        MONADIK_TRY_LOG_CAPTURES=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MONADIK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    try_: TrySettings = Field(default_factory=TrySettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, else the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MonadikSettings:
    """Get the global settings instance (cached)."""
    return MonadikSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
