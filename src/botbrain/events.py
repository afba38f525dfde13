"""Synchronous in-process event channel.

Handlers are kept per event name in registration order and called on the
emitting thread.  A handler that raises aborts delivery to the handlers
registered after it and the exception propagates to whoever emitted.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any, Protocol

Handler = Callable[..., Any]


class BrainEvent(StrEnum):
    LOADED = "loaded"
    SAVE = "save"
    CLOSE = "close"


class RobotEvent(StrEnum):
    RUNNING = "running"


class EventSource(Protocol):
    """Anything a brain can be bound to: it only needs to accept subscriptions."""

    def on(self, event: str, handler: Handler) -> Callable[[], None]: ...


class EventEmitter:
    """Observer registry mapping event names to ordered handler lists."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe *handler* to *event*.

        Returns a callable that removes the subscription again.
        """
        self._handlers.setdefault(str(event), []).append(handler)

        def _unsubscribe() -> None:
            self.off(event, handler)

        return _unsubscribe

    def once(self, event: str, handler: Handler) -> Callable[[], None]:
        """Subscribe *handler* for the next emission of *event* only."""

        def _wrapper(*args: Any) -> Any:
            self.off(event, _wrapper)
            return handler(*args)

        return self.on(event, _wrapper)

    def off(self, event: str, handler: Handler) -> None:
        """Remove the first registration of *handler*; no-op if absent."""
        handlers = self._handlers.get(str(event))
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._handlers[str(event)]

    def remove_all_listeners(self, event: str | None = None) -> None:
        if event is None:
            self._handlers.clear()
        else:
            self._handlers.pop(str(event), None)

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(str(event), ()))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every handler of *event* with *args*, in registration order.

        Returns ``True`` if the event had handlers.
        """
        # Iterate over a copy so handlers may unsubscribe (``once``) mid-delivery.
        handlers = list(self._handlers.get(str(event), ()))
        for handler in handlers:
            handler(*args)
        return bool(handlers)
