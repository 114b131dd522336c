"""Event dispatch primitives."""

from .bus import EventBus
from .completion import Completion, DispatchOutcome
from .event import AsyncEvent
from .exceptions import AggregateDispatchError, AsyncEventError, HandlerInterrupted
from .handlers import AsyncEventHandler, SyncEventHandler, from_sync, lift_sync

__all__ = [
    "AsyncEvent",
    "AsyncEventHandler",
    "SyncEventHandler",
    "Completion",
    "DispatchOutcome",
    "EventBus",
    "AggregateDispatchError",
    "AsyncEventError",
    "HandlerInterrupted",
    "from_sync",
    "lift_sync",
]
