"""Configuration management using pydantic-settings."""

from .settings import (
    LoggingSettings,
    SimpleResultSettings,
    TraceSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "SimpleResultSettings",
    "TraceSettings",
    "clear_settings_cache",
    "get_settings",
]
