"""asyncevent public API."""

from .config import ThermometerConfig
from .domain import (
    AggregateDispatchError,
    AsyncEvent,
    AsyncEventError,
    AsyncEventHandler,
    Completion,
    DispatchOutcome,
    EventBus,
    HandlerInterrupted,
    SyncEventHandler,
    from_sync,
    lift_sync,
)

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
    "ThermometerConfig",
    "from_sync",
    "lift_sync",
]
