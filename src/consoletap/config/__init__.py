"""
consoletap Configuration Module.

Nested settings, one orthogonal concern per sub-module, each with its own
environment variable prefix:

    CONSOLETAP_*      tap defaults (kinds, sinks)
    CONSOLETAP_LOG_*  diagnostic logging

Usage:
    from consoletap.config import settings

    settings.tap.type_list  # ["log", "warn", "error", "debug"]
    settings.logging.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LogFormat, LoggingSettings, LogLevel
from .tap import TapSettings


class Settings(BaseSettings):
    """Composite settings aggregating every configuration domain."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def tap(self) -> TapSettings:
        return TapSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "TapSettings",
    "LoggingSettings",
    "LogLevel",
    "LogFormat",
]
