"""
consoletap exception hierarchy.

Configuration errors are raised synchronously while a tap is being built;
double attachment signals a programming error. Failures inside sinks are not
wrapped: they surface as whatever the sink raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ConsoleTapError(Exception):
    """Base class for every error raised by consoletap."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(ConsoleTapError, ValueError):
    """The supplied tap configuration was rejected."""

    pass


class MissingTypes(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Missing types", code="MISSING_TYPES")


class MissingSinks(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Missing sinks", code="MISSING_SINKS")


class InvalidTypes(ConfigurationError):
    """`types` is not a non-empty sequence of output kinds."""

    def __init__(self, *, reason: str, value: Any = None) -> None:
        super().__init__(
            f"Invalid types: {reason}",
            code="INVALID_TYPES",
            details={"reason": reason, "value": repr(value)},
        )


class InvalidSinks(ConfigurationError):
    """`sinks` is not a non-empty mapping."""

    def __init__(self, *, reason: str, value: Any = None) -> None:
        super().__init__(
            f"Invalid sinks: {reason}",
            code="INVALID_SINKS",
            details={"reason": reason, "value": repr(value)},
        )


class InvalidFileDir(ConfigurationError):
    def __init__(self, *, value: Any) -> None:
        super().__init__(
            f"Invalid file sink dir {value!r}: must be a non-empty string",
            code="INVALID_FILE_DIR",
            details={"value": repr(value)},
        )


class InvalidHistorySize(ConfigurationError):
    def __init__(self, *, value: Any) -> None:
        super().__init__(
            f"Invalid memory history size {value!r}: must be a number",
            code="INVALID_HISTORY_SIZE",
            details={"value": repr(value)},
        )


class InvalidTimestamp(ConfigurationError):
    def __init__(self, *, value: Any) -> None:
        super().__init__(
            f"Invalid file timestamp {value!r}: must be callable",
            code="INVALID_TIMESTAMP",
            details={"value": repr(value)},
        )


class UnknownOutputKind(ConfigurationError):
    def __init__(self, *, kind: Any, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid type {kind!r}, must be one of {', '.join(allowed)}",
            code="UNKNOWN_OUTPUT_KIND",
            details={"kind": repr(kind), "allowed": list(allowed)},
        )


class UnknownSink(ConfigurationError):
    def __init__(self, *, sink: Any, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid sink {sink!r}, must be one of {', '.join(allowed)}",
            code="UNKNOWN_SINK",
            details={"sink": repr(sink), "allowed": list(allowed)},
        )


# ================================
# Attachment errors
# ================================


class DoubleAttachmentError(ConsoleTapError, RuntimeError):
    """An output kind already carries an active interception."""

    def __init__(self, *, kind: str) -> None:
        super().__init__(
            f"Attempted to attach to console.{kind} multiple times",
            code="DOUBLE_ATTACHMENT",
            details={"kind": kind},
        )
        self.kind = kind
