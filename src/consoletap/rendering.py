"""
Argument rendering.

Plain values (strings, numbers, booleans, ``None``, bytes) render as their
textual form. Everything else gets a deep, human-readable dump built on
``pprint``: containers are walked, objects that only have the default
``object.__repr__`` are expanded into ``ClassName(attr=value, ...)``, and
cycles render as ``...``.
"""

from __future__ import annotations

import dataclasses
import inspect
import pprint
from collections.abc import Mapping
from typing import Any, Iterable

PLAIN_TYPES = (str, int, float, complex, bool, type(None), bytes, bytearray)

RENDER_WIDTH = 80

# Containers and objects nested deeper than this collapse to a placeholder.
RENDER_DEPTH = 8


class _Raw:
    """Leaf whose repr is fixed text."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return self.text


def _public_attrs(value: Any) -> dict[str, Any]:
    attrs: dict[str, Any] = {}
    if hasattr(value, "__dict__"):
        attrs.update({k: v for k, v in vars(value).items() if not k.startswith("_")})
    for cls in type(value).__mro__:
        slots = getattr(cls, "__slots__", ())
        for slot in (slots,) if isinstance(slots, str) else slots:
            if slot.startswith("_") or slot in attrs:
                continue
            try:
                attrs[slot] = getattr(value, slot)
            except AttributeError:
                continue
    return attrs


def _has_default_repr(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__


def _format_object(
    name: str, fields: Iterable[tuple[str, Any]], seen: set[int], depth: int
) -> _Raw:
    body = ", ".join(f"{key}={_normalize(val, seen, depth + 1)!r}" for key, val in fields)
    return _Raw(f"{name}({body})")


def _placeholder(value: Any) -> _Raw:
    if isinstance(value, Mapping):
        return _Raw("{...}")
    if isinstance(value, list):
        return _Raw("[...]")
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return _Raw("(...)")
    if isinstance(value, (set, frozenset)):
        return _Raw("{...}")
    return _Raw(f"{type(value).__qualname__}(...)")


def _normalize(value: Any, seen: set[int], depth: int = 0) -> Any:
    if isinstance(value, PLAIN_TYPES):
        return value

    marker = id(value)
    if marker in seen:
        return _Raw("...")
    seen = seen | {marker}

    if inspect.isclass(value):
        return _Raw(f"<class {value.__qualname__}>")
    if inspect.isroutine(value) or (callable(value) and _has_default_repr(value)):
        name = getattr(value, "__qualname__", None) or type(value).__qualname__
        return _Raw(f"<function {name}>")

    expandable = (
        isinstance(value, (Mapping, list, set, frozenset))
        or (isinstance(value, tuple) and not hasattr(value, "_fields"))
        or dataclasses.is_dataclass(value)
        or _has_default_repr(value)
    )
    if expandable and depth >= RENDER_DEPTH:
        return _placeholder(value)
    child = depth + 1

    if isinstance(value, Mapping):
        return {_normalize(k, seen, child): _normalize(v, seen, child) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v, seen, child) for v in value]
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return tuple(_normalize(v, seen, child) for v in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(_normalize(v, seen, child) for v in value)

    if dataclasses.is_dataclass(value):
        fields = [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value) if f.repr]
        return _format_object(type(value).__qualname__, fields, seen, depth)

    if _has_default_repr(value):
        return _format_object(type(value).__qualname__, _public_attrs(value).items(), seen, depth)

    return value


def render_value(value: Any) -> str:
    """Render a single argument of a console call."""
    if isinstance(value, str):
        return value
    if isinstance(value, PLAIN_TYPES):
        return str(value)
    return pprint.pformat(_normalize(value, set()), width=RENDER_WIDTH, sort_dicts=False)


def render_message(args: Iterable[Any]) -> str:
    """Join rendered arguments with single spaces and trim the result."""
    return " ".join(render_value(arg) for arg in args).strip()
