"""
Configuration validation.

Rules run in a fixed order and the first violation raises; nothing is
installed until the whole configuration has been accepted.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .constants import OUTPUT_KINDS, SINK_NAMES
from .exceptions import (
    InvalidFileDir,
    InvalidHistorySize,
    InvalidSinks,
    InvalidTimestamp,
    InvalidTypes,
    MissingSinks,
    MissingTypes,
    UnknownOutputKind,
    UnknownSink,
)
from .types import FileSinkConfig, MemorySinkConfig, SinksConfig, TapConfig


def _as_mapping(value: Any) -> Mapping[str, Any] | None:
    if isinstance(value, BaseModel):
        return dict(value)
    if isinstance(value, Mapping):
        return value
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_absent(value: Any) -> bool:
    """Falsy sub-configs (``None``, ``False``, ``0``, ``""``, NaN) leave their sink off."""
    if isinstance(value, (Mapping, BaseModel)):
        return False
    return not value or _is_nan(value)


def validate_config(types: Any, sinks: Any) -> TapConfig:
    """Validate a raw tap configuration and return the frozen ``TapConfig``.

    Raises:
        ConfigurationError: on the first rule the configuration violates.
    """
    if types is None:
        raise MissingTypes()
    if sinks is None:
        raise MissingSinks()

    if isinstance(types, (str, bytes)) or not isinstance(types, (list, tuple)):
        raise InvalidTypes(reason="types needs to be a list", value=types)
    if len(types) == 0:
        raise InvalidTypes(reason="types are empty", value=types)

    sinks_map = _as_mapping(sinks)
    if sinks_map is None:
        raise InvalidSinks(reason="sinks needs to be a mapping", value=sinks)
    if len(sinks_map) == 0:
        raise InvalidSinks(reason="sinks are empty", value=sinks)

    file_cfg = sinks_map.get("file")
    file_map = None
    if not _is_absent(file_cfg):
        file_map = _as_mapping(file_cfg)
        directory = file_map.get("dir") if file_map is not None else None
        if not isinstance(directory, str) or not directory:
            raise InvalidFileDir(value=directory)

    memory_cfg = sinks_map.get("memory")
    memory_map = None
    if not _is_absent(memory_cfg):
        memory_map = _as_mapping(memory_cfg)
        history = memory_map.get("history") if memory_map is not None else None
        if not _is_number(history) or _is_nan(history):
            raise InvalidHistorySize(value=history)

    if file_map is not None:
        timestamp = file_map.get("timestamp")
        if timestamp is not None and not callable(timestamp):
            raise InvalidTimestamp(value=timestamp)

    for kind in types:
        if kind not in OUTPUT_KINDS:
            raise UnknownOutputKind(kind=kind, allowed=OUTPUT_KINDS)

    for key in sinks_map:
        if key not in SINK_NAMES:
            raise UnknownSink(sink=key, allowed=SINK_NAMES)

    return TapConfig(
        types=tuple(dict.fromkeys(types)),
        sinks=SinksConfig(
            file=(
                FileSinkConfig(dir=file_map["dir"], timestamp=file_map.get("timestamp"))
                if file_map is not None
                else None
            ),
            memory=MemorySinkConfig(history=memory_map["history"]) if memory_map is not None else None,
            emit=bool(sinks_map.get("emit", False)),
        ),
    )
