"""
Interceptors for routing standard library logging into a console.
"""

from __future__ import annotations

import logging
from typing import Optional

from .console import Console


class ConsoleHandler(logging.Handler):
    """
    Redirect standard library logging records to console output kinds.

    DEBUG goes to ``debug``, INFO to ``log``, WARNING to ``warn`` and
    ERROR/CRITICAL to ``error``, so taps on those kinds see library logs too.
    """

    def __init__(self, console: Console, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console

    @staticmethod
    def kind_for(levelno: int) -> str:
        if levelno >= logging.ERROR:
            return "error"
        if levelno >= logging.WARNING:
            return "warn"
        if levelno >= logging.INFO:
            return "log"
        return "debug"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.console.get(self.kind_for(record.levelno))(msg)
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(
    console: Console,
    logger: Optional[logging.Logger] = None,
    *,
    level: int = logging.NOTSET,
) -> ConsoleHandler:
    """Attach a ``ConsoleHandler`` for ``console`` to ``logger`` (root by default).

    Calling it again for the same console and logger returns the existing handler.
    """
    target = logger or logging.getLogger()
    for handler in target.handlers:
        if isinstance(handler, ConsoleHandler) and handler.console is console:
            return handler

    handler = ConsoleHandler(console, level)
    target.addHandler(handler)
    return handler
