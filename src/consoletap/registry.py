"""
Interception registry.

Records which output kinds of a console are currently wrapped. A kind can
carry at most one active interception; the check runs against this registry
rather than a flag stamped onto the function object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional

from .exceptions import DoubleAttachmentError


OutputFn = Callable[..., Any]


@dataclass(frozen=True)
class Interception:
    """Active interception of one output kind."""

    kind: str
    original: OutputFn
    wrapper: OutputFn
    owner: Any = None


class InterceptionRegistry:
    """Output kind -> active ``Interception``."""

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: Dict[str, Interception] = {}

    def __contains__(self, kind: object) -> bool:
        return kind in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, kind: str) -> Optional[Interception]:
        return self._records.get(kind)

    def is_intercepted(self, kind: str) -> bool:
        return kind in self._records

    def ensure_free(self, kind: str) -> None:
        """Raise ``DoubleAttachmentError`` if ``kind`` is already wrapped."""
        if kind in self._records:
            raise DoubleAttachmentError(kind=kind)

    def record(self, interception: Interception) -> None:
        self.ensure_free(interception.kind)
        self._records[interception.kind] = interception
