"""Named events sharing one registry."""

from __future__ import annotations

import threading
from typing import Any, Iterable

from .completion import Completion
from .event import AsyncEvent
from .handlers import AsyncEventHandler


class EventBus:
    """Async pub-sub keyed by event name, one :class:`AsyncEvent` per name."""

    def __init__(self) -> None:
        self._events: dict[str, AsyncEvent[Any]] = {}
        self._lock = threading.Lock()

    def event(self, event_name: str) -> AsyncEvent[Any]:
        with self._lock:
            event = self._events.get(event_name)
            if event is None:
                event = self._events[event_name] = AsyncEvent(event_name)
            return event

    def subscribe(self, event_name: str, listener: AsyncEventHandler[Any]) -> None:
        self.event(event_name).subscribe(listener)

    def unsubscribe(self, event_name: str, listener: AsyncEventHandler[Any]) -> None:
        with self._lock:
            event = self._events.get(event_name)
        if event is not None:
            event.unsubscribe(listener)

    def publish(self, event_name: str, sender: Any, payload: Any = None) -> Completion:
        with self._lock:
            event = self._events.get(event_name)
        if event is None:
            return Completion.completed()
        return event.invoke_all(sender, payload)

    def listeners(self, event_name: str) -> tuple[AsyncEventHandler[Any], ...]:
        with self._lock:
            event = self._events.get(event_name)
        return event.handlers() if event is not None else ()

    def names(self) -> Iterable[str]:
        with self._lock:
            return tuple(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
