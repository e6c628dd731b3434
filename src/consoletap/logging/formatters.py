"""
Console rendering for diagnostic events.
"""

from __future__ import annotations

from datetime import datetime, timezone

from structlog.typing import EventDict

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
    "key": "\033[34m",
}

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[1;31m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, LEVEL_COLORS.get(color, ''))}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Fixed-width, right-aligned columns: timestamp | level | logger | message key=value..."""

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 24
    SEPARATOR = " | "

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if len(text) > width:
            text = "..." + text[-(width - 3) :] if width > 3 else text[-width:]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw_timestamp: str | None) -> str:
        if raw_timestamp:
            try:
                dt = datetime.fromisoformat(raw_timestamp.replace("Z", "+00:00"))
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = True) -> str:
        """Format an event dict into an aligned string."""
        level = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        logger_name = str(event_dict.get("logger", "root"))

        extras = []
        for key, value in event_dict.items():
            if key in cls.EXCLUDED_KEYS:
                continue
            if use_color:
                extras.append(f"{colorize(key, 'key')}={colorize(str(value), 'dim')}")
            else:
                extras.append(f"{key}={value}")
        if extras:
            message = f"{message} " + " ".join(extras)

        columns = [
            (cls._format_timestamp(event_dict.get("timestamp")), "timestamp"),
            (cls._fit_right(level, cls.LEVEL_WIDTH), level),
            (cls._fit_right(logger_name, cls.LOGGER_WIDTH), "logger"),
        ]
        rendered = [colorize(text, color) if use_color else text for text, color in columns]
        return cls.SEPARATOR.join(rendered + [message])
