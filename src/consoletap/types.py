"""
consoletap types.

Validated configuration is held in frozen pydantic models so an accepted
configuration can not drift after the tap is built. History entries are plain
frozen dataclasses.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


TimestampFn = Callable[[datetime], str]


@dataclass(frozen=True)
class HistoryEntry:
    """One rendered, trimmed console line and the time it was captured (UTC)."""

    time: datetime
    message: str


class FileSinkConfig(BaseModel):
    """Per-day append-only file sink."""

    model_config = ConfigDict(frozen=True)

    dir: str
    timestamp: Optional[TimestampFn] = None


class MemorySinkConfig(BaseModel):
    """Bounded in-memory history, applied to every intercepted kind."""

    model_config = ConfigDict(frozen=True)

    history: Union[int, float]

    @property
    def bound(self) -> Optional[int]:
        """Number of entries kept per kind; ``None`` means unbounded.

        Fractional sizes round up and negative sizes keep nothing. Sizes past
        what a deque can hold are unbounded.
        """
        if isinstance(self.history, float) and math.isinf(self.history):
            return None if self.history > 0 else 0
        size = max(0, math.ceil(self.history))
        return None if size >= sys.maxsize else size


class SinksConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: Optional[FileSinkConfig] = None
    memory: Optional[MemorySinkConfig] = None
    emit: bool = False

    @property
    def enabled(self) -> Tuple[str, ...]:
        """Names of the active sinks, in dispatch order."""
        names = []
        if self.file is not None:
            names.append("file")
        if self.memory is not None:
            names.append("memory")
        if self.emit:
            names.append("emit")
        return tuple(names)


class TapConfig(BaseModel):
    """An accepted tap configuration."""

    model_config = ConfigDict(frozen=True)

    types: Tuple[str, ...]
    sinks: SinksConfig
