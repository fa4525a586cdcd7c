"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from simpleresult.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.trace.enabled
    False

    # Or with environment variables:
    # SIMPLERESULT_LOG_LEVEL=DEBUG
    # SIMPLERESULT_TRACE_ENABLED=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLERESULT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors on/off; None auto-detects")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class TraceSettings(BaseSettings):
    """Combinator tracing configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLERESULT_TRACE_",
        extra="ignore",
    )

    enabled: bool = Field(default=False, description="Log every then/then_on_fail decision at DEBUG")
    include_details: bool = Field(default=False, description="Capture tracebacks in Error.from_exception")


class SimpleResultSettings(BaseSettings):
    """Root settings for simpleresult.

    Loads configuration from environment variables with SIMPLERESULT_ prefix.

    Example environment variables:
        SIMPLERESULT_DEBUG=true
        SIMPLERESULT_LOG_LEVEL=DEBUG
        SIMPLERESULT_LOG_FORMAT=json
        SIMPLERESULT_TRACE_ENABLED=true
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLERESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    trace: TraceSettings = Field(default_factory=TraceSettings)

    @computed_field
    @property
    def tracing(self) -> bool:
        """Whether combinator decisions are logged (explicit flag or debug mode)."""
        return self.trace.enabled or self.debug


@lru_cache(maxsize=1)
def get_settings() -> SimpleResultSettings:
    """Get the global settings instance (cached)."""
    return SimpleResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
