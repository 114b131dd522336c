"""Handler contract and the adapter for synchronous callbacks."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from .completion import Completion

TPayload = TypeVar("TPayload")

AsyncEventHandler = Callable[[Any, TPayload], Awaitable[None]]
SyncEventHandler = Callable[[Any, TPayload], None]


def from_sync(callback: SyncEventHandler[TPayload]) -> AsyncEventHandler[TPayload]:
    """Wrap a plain ``callback(sender, payload)`` into an async event handler.

    The callback runs to completion when the handler is called, and the handler
    returns an already-resolved :class:`Completion`. An exception raised by the
    callback is carried by that completion instead of being swallowed.
    """

    def handler(sender: Any, payload: TPayload) -> Completion:
        try:
            callback(sender, payload)
        except Exception as exc:
            return Completion.failed(exc)
        return Completion.completed(dispatched=1)

    handler.__wrapped__ = callback  # type: ignore[attr-defined]
    handler.__name__ = getattr(callback, "__name__", handler.__name__)
    handler.__qualname__ = getattr(callback, "__qualname__", handler.__qualname__)
    return handler


lift_sync = from_sync
