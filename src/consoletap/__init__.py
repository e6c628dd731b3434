"""
consoletap: tee console-style output into files, memory and events.

Wraps the ``log``, ``warn``, ``error`` and ``debug`` output functions of a
``Console`` and duplicates every call to the configured sinks:
- file: one append-only file per kind per UTC day
- memory: bounded per-kind history
- emit: synchronous event broadcast keyed by kind

The original output always runs first.
"""

from .console import Console, console
from .events import EventEmitter
from .exceptions import ConfigurationError, ConsoleTapError, DoubleAttachmentError
from .interceptors import ConsoleHandler, intercept_stdlib_logging
from .io import StreamToConsole, redirect_std_streams, restore_std_streams
from .logging import configure_logging, get_logger
from .rendering import render_message, render_value
from .tap import ConsoleTap
from .types import HistoryEntry, TapConfig
from .validation import validate_config

__all__ = [
    "Console",
    "ConsoleHandler",
    "ConsoleTap",
    "ConsoleTapError",
    "ConfigurationError",
    "DoubleAttachmentError",
    "EventEmitter",
    "HistoryEntry",
    "StreamToConsole",
    "TapConfig",
    "configure_logging",
    "console",
    "get_logger",
    "intercept_stdlib_logging",
    "redirect_std_streams",
    "render_message",
    "render_value",
    "restore_std_streams",
    "validate_config",
]
