"""
Core diagnostic logging configuration.

The pipeline is scoped to consoletap loggers through ``structlog.wrap_logger``
so the host application's own structlog configuration is left alone. Until
``configure_logging`` installs a sink, events are dropped.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .sinks import BaseSink, LogFormat, StdioSink

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []
_min_level: int = logging.WARNING

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "msg": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


# =============================================================================
# Structlog Processors
# =============================================================================


def filter_by_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop events below the configured level, and everything while no sink is installed."""
    if not _sinks or _METHOD_LEVELS.get(method_name, logging.INFO) < _min_level:
        raise structlog.DropEvent
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "consoletap")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render to all configured sinks. Returns empty to suppress default output."""
    for sink in _sinks:
        sink.emit(event_dict)
    return ""


PROCESSORS: list[Processor] = [
    filter_by_level,
    structlog.stdlib.add_log_level,
    add_timestamp,
    add_logger_name,
    rename_event_key,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    multi_sink_renderer,
]


# =============================================================================
# Loggers
# =============================================================================


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger bound to the consoletap pipeline."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_NOP_FILE),
        processors=PROCESSORS,
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        _name=name or "consoletap",
    )


# =============================================================================
# Configuration Logic
# =============================================================================


def _initialize_sinks(fmt: LogFormat, stream: Any) -> None:
    for sink in _sinks:
        sink.close()
    _sinks.clear()
    _sinks.append(StdioSink(fmt=fmt, stream=stream))


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    stream: Any = None,
) -> None:
    """
    Configure consoletap's own diagnostic logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to settings
        fmt: Output format (console, json); defaults to settings
        stream: Stream for the stdio sink (default: stderr)
    """
    from consoletap.config import settings

    global _min_level

    level = (level or settings.logging.level.value).upper()
    fmt = (fmt or settings.logging.format.value).lower()
    log_format: LogFormat = "json" if fmt == "json" else "console"

    _initialize_sinks(log_format, stream)
    _min_level = getattr(logging, level, logging.WARNING)


def reset_logging() -> None:
    """Remove every diagnostic sink; events are dropped again."""
    global _min_level

    for sink in _sinks:
        sink.close()
    _sinks.clear()
    _min_level = logging.WARNING
