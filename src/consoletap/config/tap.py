"""
Tap Configuration.

Environment-driven defaults for building a ``ConsoleTap`` without code.
"""

from typing import Any, Callable

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from consoletap.constants import ENV_PREFIX


def strftime_prefix(fmt: str) -> Callable:
    """Build a file timestamp function from a strftime pattern."""

    def timestamp(now):
        return now.strftime(fmt)

    return timestamp


class TapSettings(BaseSettings):
    """Which console kinds to tap and where their output goes."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    types: str = Field(default="log,warn,error,debug", description="Comma-separated output kinds")
    file_dir: str | None = Field(default=None, description="Directory for per-day log files")
    file_timestamp_format: str | None = Field(
        default=None,
        description="strftime pattern prepended to every file line",
    )
    memory_history: float | None = Field(default=None, description="Entries kept per kind in memory")
    emit: bool = Field(default=False, description="Broadcast every call as an event")

    @property
    def type_list(self) -> list[str]:
        return [t.strip().lower() for t in self.types.split(",") if t.strip()]

    def to_sinks(self) -> dict[str, Any]:
        """Sink mapping in the shape ``ConsoleTap`` accepts."""
        sinks: dict[str, Any] = {}
        if self.file_dir is not None:
            sinks["file"] = {
                "dir": self.file_dir,
                "timestamp": strftime_prefix(self.file_timestamp_format) if self.file_timestamp_format else None,
            }
        if self.memory_history is not None:
            sinks["memory"] = {"history": self.memory_history}
        if self.emit:
            sinks["emit"] = True
        return sinks
