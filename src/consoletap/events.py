"""
Synchronous event broadcast.

Listeners are keyed by event name and called inline, in registration order.
A listener that raises stops the broadcast and the exception reaches the
caller of ``emit``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

Listener = Callable[..., Any]


class EventEmitter:
    """Minimal synchronous publish/subscribe surface."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event: str, listener: Optional[Listener] = None) -> Any:
        """Register ``listener`` for ``event`` and return it.

        Without a listener, returns a decorator: ``@emitter.on("error")``.
        """
        if listener is None:
            return lambda fn: self.on(event, fn)
        self._listeners.setdefault(event, []).append(listener)
        return listener

    add_listener = on

    def once(self, event: str, listener: Optional[Listener] = None) -> Any:
        """Register ``listener`` to run on the next ``event`` only."""
        if listener is None:
            return lambda fn: self.once(event, fn)

        def _once(*args: Any) -> Any:
            self.off(event, _once)
            return listener(*args)

        _once.listener = listener  # type: ignore[attr-defined]
        self.on(event, _once)
        return listener

    def off(self, event: str, listener: Listener) -> None:
        """Remove the most recently added registration of ``listener``; unknown listeners are ignored."""
        registered = self._listeners.get(event)
        if not registered:
            return
        for index in range(len(registered) - 1, -1, -1):
            candidate = registered[index]
            if candidate == listener or getattr(candidate, "listener", None) == listener:
                del registered[index]
                break
        if not registered:
            del self._listeners[event]

    remove_listener = off

    def remove_all_listeners(self, event: str | None = None) -> None:
        if event is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)

    def listeners(self, event: str) -> List[Listener]:
        return [getattr(fn, "listener", fn) for fn in self._listeners.get(event, [])]

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def event_names(self) -> List[str]:
        return list(self._listeners)

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of ``event`` with ``args``. Returns True if any listener ran."""
        registered = self._listeners.get(event)
        if not registered:
            return False
        for listener in list(registered):
            listener(*args)
        return True
