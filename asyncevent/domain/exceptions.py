"""Exceptions raised by asyncevent dispatch."""

from __future__ import annotations

from typing import Sequence


class AsyncEventError(RuntimeError):
    """Base class for asyncevent exceptions."""


class HandlerInterrupted(AsyncEventError):
    """Recorded when a handler was cancelled or aborted by a non-Exception error."""

    def __init__(self, handler_index: int, reason: BaseException | None = None) -> None:
        detail = type(reason).__name__ if reason is not None else "cancelled"
        super().__init__(f"Handler #{handler_index} did not finish ({detail})")
        self.handler_index = handler_index
        self.__cause__ = reason


class AggregateDispatchError(ExceptionGroup):
    """Every handler failure from one dispatch, in subscription order."""

    @property
    def primary(self) -> Exception:
        return self.exceptions[0]

    def derive(self, excs: Sequence[Exception]) -> "AggregateDispatchError":
        return AggregateDispatchError(self.message, excs)
