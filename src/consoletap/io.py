"""
I/O redirection utilities.
"""

from __future__ import annotations

import sys
from typing import Any, Tuple

from .console import Console


class StreamToConsole:
    """File-like object that sends each completed line to a console output kind."""

    def __init__(self, console: Console, kind: str, original_stream: Any):
        self.console = console
        self.kind = kind
        self.original_stream = original_stream
        self.linebuf = ""

    def _send(self, line: str) -> None:
        self.console.get(self.kind)(line)

    def write(self, buf: str | bytes) -> int:
        if isinstance(buf, bytes):
            buf = buf.decode(self.encoding, errors="replace")

        for line in buf.splitlines(True):
            if line.endswith("\n"):
                self.linebuf += line.rstrip("\r\n")
                pending, self.linebuf = self.linebuf, ""
                self._send(pending)
            else:
                self.linebuf += line
        return len(buf)

    def writelines(self, lines: Any) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        if self.linebuf:
            pending, self.linebuf = self.linebuf, ""
            self._send(pending)

    def isatty(self) -> bool:
        return False

    # Proxy all other methods to original stream
    def __getattr__(self, name: str) -> Any:
        return getattr(self.original_stream, name)

    @property
    def encoding(self) -> str:
        return getattr(self.original_stream, "encoding", None) or "utf-8"


def redirect_std_streams(
    console: Console,
    *,
    stdout_kind: str = "log",
    stderr_kind: str = "error",
) -> Tuple[Any, Any]:
    """Route ``sys.stdout``/``sys.stderr`` writes through ``console``.

    The console is pinned to the current real streams first so its own output
    does not loop back. Returns the previous ``(stdout, stderr)`` pair.
    """
    previous = (sys.stdout, sys.stderr)
    console.pin_streams()

    if not isinstance(sys.stdout, StreamToConsole):
        sys.stdout = StreamToConsole(console, stdout_kind, sys.stdout)  # type: ignore[assignment]
    if not isinstance(sys.stderr, StreamToConsole):
        sys.stderr = StreamToConsole(console, stderr_kind, sys.stderr)  # type: ignore[assignment]
    return previous


def restore_std_streams(previous: Tuple[Any, Any]) -> None:
    """Undo ``redirect_std_streams``, flushing any buffered partial lines."""
    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, StreamToConsole):
            stream.flush()
    sys.stdout, sys.stderr = previous
