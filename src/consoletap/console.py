"""
Console-style output functions.

A ``Console`` exposes ``log``, ``warn``, ``error`` and ``debug`` as plain
callables. ``log`` and ``debug`` print to stdout, ``warn`` and ``error`` to
stderr. The module-level ``console`` is the shared, process-wide instance.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from .constants import OUTPUT_KINDS, STDERR_KINDS
from .registry import InterceptionRegistry


class Console:
    """Process-wide output functions plus the registry of their interceptions.

    Streams left as ``None`` resolve to the current ``sys.stdout`` /
    ``sys.stderr`` at call time.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        self._stdout = stdout
        self._stderr = stderr
        self.registry = InterceptionRegistry()
        for kind in OUTPUT_KINDS:
            setattr(self, kind, self._writer(kind))

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def pin_streams(self) -> None:
        """Bind unset streams to the current ``sys`` streams."""
        if self._stdout is None:
            self._stdout = sys.stdout
        if self._stderr is None:
            self._stderr = sys.stderr

    def _writer(self, kind: str) -> Callable[..., None]:
        use_stderr = kind in STDERR_KINDS

        def write(*args: Any, sep: str = " ", end: str = "\n", flush: bool = False) -> None:
            stream = self.stderr if use_stderr else self.stdout
            print(*args, sep=sep, end=end, file=stream, flush=flush)

        write.__name__ = kind
        write.__qualname__ = f"Console.{kind}"
        return write

    def get(self, kind: str) -> Callable[..., Any]:
        return getattr(self, kind)

    def replace(self, kind: str, fn: Callable[..., Any]) -> Callable[..., Any]:
        """Install ``fn`` as the output function for ``kind`` and return the previous one."""
        previous = getattr(self, kind)
        setattr(self, kind, fn)
        return previous

    def __repr__(self) -> str:
        intercepted = ", ".join(self.registry) or "none"
        return f"<Console intercepted={intercepted}>"


console = Console()
