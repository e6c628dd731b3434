"""
Tap sinks.

Each intercepted console call is handed to every enabled sink, always in the
order file -> memory -> emit. Sinks never catch their own failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Deque, Dict, List, Optional

from .constants import FILE_NAME_TEMPLATE, LINE_TERMINATOR
from .events import EventEmitter
from .types import FileSinkConfig, HistoryEntry, MemorySinkConfig

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for tap sinks."""

    name: str = ""

    def register(self, kind: str) -> None:
        """Prepare per-kind state when ``kind`` gets intercepted."""
        return None

    @abstractmethod
    def emit(self, kind: str, message: str, now: datetime) -> None:
        """Deliver one rendered message captured at ``now`` (UTC)."""
        ...


class FileSink(BaseSink):
    """Appends one line per call to ``<dir>/<kind>_<Y>_<M>_<D>.log``.

    The file is opened, appended and closed on every call; the directory is
    expected to exist.
    """

    name = "file"

    def __init__(self, config: FileSinkConfig):
        self._dir = Path(config.dir)
        self._timestamp = config.timestamp

    @staticmethod
    def file_name(kind: str, now: datetime) -> str:
        return FILE_NAME_TEMPLATE.format(kind=kind, year=now.year, month=now.month, day=now.day)

    def path_for(self, kind: str, now: datetime) -> Path:
        return self._dir / self.file_name(kind, now)

    def emit(self, kind: str, message: str, now: datetime) -> None:
        prefix = self._timestamp(now) if self._timestamp else ""
        with open(self.path_for(kind, now), "a", encoding="utf-8", newline="") as fh:
            fh.write(f"{prefix}{message}{LINE_TERMINATOR}")


class MemorySink(BaseSink):
    """Keeps the most recent ``history`` entries per kind."""

    name = "memory"

    def __init__(self, config: MemorySinkConfig):
        self._bound: Optional[int] = config.bound
        self._store: Dict[str, Deque[HistoryEntry]] = {}

    def register(self, kind: str) -> None:
        self._store[kind] = deque(maxlen=self._bound)

    def emit(self, kind: str, message: str, now: datetime) -> None:
        self._store[kind].append(HistoryEntry(time=now, message=message))

    def history(self, kind: str) -> List[HistoryEntry]:
        return list(self._store.get(kind, ()))


class EmitSink(BaseSink):
    """Broadcasts ``(kind, message)`` on an ``EventEmitter``."""

    name = "emit"

    def __init__(self, emitter: EventEmitter):
        self._emitter = emitter

    def emit(self, kind: str, message: str, now: datetime) -> None:
        self._emitter.emit(kind, message)
