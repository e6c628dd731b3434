"""
ConsoleTap: console interception and sink fan-out.

Example (tees ``console.log`` and ``console.error`` to per-day files, keeps
the last 5 entries of each in memory and broadcasts them)::

    from consoletap import ConsoleTap, console

    tap = ConsoleTap(
        types=["log", "error"],
        sinks={
            "emit": True,
            "memory": {"history": 5},
            "file": {"dir": "./logs", "timestamp": lambda d: d.strftime("[%H:%M:%S.%f UTC] ")},
        },
    )

    @tap.on("error")
    def on_error(message):
        ...  # logging to console.error from here recurses

    console.error("boom")
    tap.logs["error"]  # last 5 console.error entries
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .config import TapSettings, settings as default_settings
from .console import Console, console as default_console
from .events import EventEmitter
from .logging import get_logger
from .registry import Interception
from .rendering import render_message
from .sinks import BaseSink, EmitSink, FileSink, MemorySink
from .types import HistoryEntry, TapConfig
from .validation import validate_config

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ConsoleTap(EventEmitter):
    """Wraps console output functions and duplicates every call to sinks.

    Construction validates the configuration, then wraps each requested kind
    in order. A kind that is already wrapped on the console raises
    ``DoubleAttachmentError``; kinds wrapped earlier in the same construction
    stay wrapped.
    """

    def __init__(
        self,
        types: Any = None,
        sinks: Any = None,
        *,
        console: Optional[Console] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__()
        self.config: TapConfig = validate_config(types, sinks)
        self.console = console if console is not None else default_console
        self._clock = clock or utc_now

        self._memory: Optional[MemorySink] = None
        self._sinks: List[BaseSink] = []
        if self.config.sinks.file is not None:
            self._sinks.append(FileSink(self.config.sinks.file))
        if self.config.sinks.memory is not None:
            self._memory = MemorySink(self.config.sinks.memory)
            self._sinks.append(self._memory)
        if self.config.sinks.emit:
            self._sinks.append(EmitSink(self))

        self._kinds: List[str] = []
        for kind in self.config.types:
            self._intercept(kind)

    @classmethod
    def from_settings(
        cls,
        tap_settings: Optional[TapSettings] = None,
        *,
        console: Optional[Console] = None,
        clock: Optional[Clock] = None,
    ) -> "ConsoleTap":
        """Build a tap from environment-driven ``TapSettings``."""
        tap_settings = tap_settings or default_settings.tap
        return cls(
            types=tap_settings.type_list,
            sinks=tap_settings.to_sinks(),
            console=console,
            clock=clock,
        )

    def _intercept(self, kind: str) -> None:
        registry = self.console.registry
        if registry.is_intercepted(kind):
            logger.warning("console_double_attachment", kind=kind)
        registry.ensure_free(kind)

        original = self.console.get(kind)
        for sink in self._sinks:
            sink.register(kind)

        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = original(*args, **kwargs)
            message = render_message(args)
            now = self._clock()
            for sink in self._sinks:
                sink.emit(kind, message, now)
            return result

        wrapper.__name__ = kind
        wrapper.__qualname__ = f"ConsoleTap.{kind}"
        wrapper.__wrapped__ = original  # type: ignore[attr-defined]

        self.console.replace(kind, wrapper)
        registry.record(Interception(kind=kind, original=original, wrapper=wrapper, owner=self))
        self._kinds.append(kind)
        logger.debug("console_intercepted", kind=kind, sinks=list(self.config.sinks.enabled))

    @property
    def types(self) -> List[str]:
        """Kinds this tap has wrapped."""
        return list(self._kinds)

    @property
    def logs(self) -> Dict[str, List[HistoryEntry]]:
        """Per-kind in-memory history, oldest first."""
        return {
            kind: self._memory.history(kind) if self._memory is not None else []
            for kind in self._kinds
        }

    def __repr__(self) -> str:
        return f"<ConsoleTap types={self._kinds} sinks={list(self.config.sinks.enabled)}>"
