"""Multicast dispatcher for asynchronous event handlers."""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import logging
import threading
from functools import partial
from typing import Any, Generic, Iterator, Union

from .completion import Completion, DispatchOutcome
from .exceptions import HandlerInterrupted
from .handlers import AsyncEventHandler, TPayload

logger = logging.getLogger(__name__)

_Signal = Union[asyncio.Future[Any], concurrent.futures.Future[Any], Completion]


class AsyncEvent(Generic[TPayload]):
    """An event with an ordered list of async handlers.

    The same handler may be subscribed several times; it is then invoked once
    per subscription and removed one subscription at a time.
    :meth:`invoke_all` starts every handler concurrently and returns a single
    :class:`Completion` that resolves when all of them have finished.
    """

    __slots__ = ("name", "_handlers", "_lock")

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._handlers: list[AsyncEventHandler[TPayload]] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: AsyncEventHandler[TPayload]) -> None:
        with self._lock:
            self._handlers.append(handler)
        logger.debug("Subscribed %r to event %s", handler, self._label)

    def unsubscribe(self, handler: AsyncEventHandler[TPayload]) -> None:
        """Remove the first subscription of ``handler``; unknown handlers are ignored."""
        with self._lock:
            for index, registered in enumerate(self._handlers):
                if registered is handler:
                    del self._handlers[index]
                    break
            else:
                return
        logger.debug("Unsubscribed %r from event %s", handler, self._label)

    def handlers(self) -> tuple[AsyncEventHandler[TPayload], ...]:
        with self._lock:
            return tuple(self._handlers)

    def clear(self) -> None:
        with self._lock:
            self._handlers.clear()

    def invoke_all(self, sender: Any, payload: TPayload | None = None) -> Completion:
        """Dispatch ``payload`` to every current handler.

        Handlers are started in subscription order without waiting on each
        other. The returned completion resolves after the last of them finishes
        and fails if any of them failed, with the earliest subscribed failure as
        the primary error. Handlers subscribed or removed after this call
        starts do not take part in it.
        """
        snapshot = self.handlers()
        if not snapshot:
            return Completion.completed()

        logger.debug("Dispatching event %s to %d handlers", self._label, len(snapshot))
        loop = _running_loop()
        failures: list[Exception | None] = [None] * len(snapshot)
        pending: dict[int, _Signal] = {}

        for index, handler in enumerate(snapshot):
            try:
                signal = handler(sender, payload)
            except Exception as exc:
                failures[index] = exc
                continue
            except BaseException as exc:
                failures[index] = HandlerInterrupted(index, exc)
                continue
            if isinstance(signal, Completion) and signal.done():
                failures[index] = signal.outcome().as_error()
                continue
            if loop is None and isinstance(signal, (Completion, concurrent.futures.Future)):
                pending[index] = signal
                continue
            if loop is None:
                _discard(signal)
                failures[index] = RuntimeError(
                    "Asynchronous event handlers need a running event loop"
                )
                continue
            try:
                pending[index] = _as_future(signal, loop)
            except (TypeError, ValueError) as exc:
                failures[index] = exc

        if not pending:
            return Completion(outcome=DispatchOutcome.from_slots(failures))
        return Completion(_join(loop, failures, pending))

    def __iadd__(self, handler: AsyncEventHandler[TPayload]) -> "AsyncEvent[TPayload]":
        self.subscribe(handler)
        return self

    def __isub__(self, handler: AsyncEventHandler[TPayload]) -> "AsyncEvent[TPayload]":
        self.unsubscribe(handler)
        return self

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __bool__(self) -> bool:
        return True

    def __contains__(self, handler: object) -> bool:
        return any(registered is handler for registered in self.handlers())

    def __iter__(self) -> Iterator[AsyncEventHandler[TPayload]]:
        return iter(self.handlers())

    def __repr__(self) -> str:
        return f"<AsyncEvent {self._label} handlers={len(self)}>"

    @property
    def _label(self) -> str:
        return self.name or hex(id(self))


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _as_future(signal: Any, loop: asyncio.AbstractEventLoop) -> _Signal:
    if isinstance(signal, Completion):
        return signal
    if isinstance(signal, concurrent.futures.Future):
        return asyncio.wrap_future(signal, loop=loop)
    return asyncio.ensure_future(signal, loop=loop)


def _discard(signal: Any) -> None:
    if inspect.iscoroutine(signal):
        signal.close()


def _failure_of(index: int, signal: _Signal) -> Exception | None:
    if isinstance(signal, Completion):
        return signal.outcome().as_error()
    if signal.cancelled():
        return HandlerInterrupted(index)
    error = signal.exception()
    if error is not None and not isinstance(error, Exception):
        return HandlerInterrupted(index, error)
    return error


def _join(
    loop: asyncio.AbstractEventLoop | None,
    failures: list[Exception | None],
    pending: dict[int, _Signal],
) -> asyncio.Future[DispatchOutcome] | concurrent.futures.Future[DispatchOutcome]:
    # Without a running loop every pending signal is thread-backed, so settle
    # may be called from worker threads.
    joined: asyncio.Future[DispatchOutcome] | concurrent.futures.Future[DispatchOutcome]
    joined = loop.create_future() if loop is not None else concurrent.futures.Future()
    lock = threading.Lock()
    remaining = len(pending)

    def settle(index: int, signal: _Signal) -> None:
        nonlocal remaining
        failure = _failure_of(index, signal)
        with lock:
            failures[index] = failure
            remaining -= 1
            if remaining or joined.done():
                return
            outcome = DispatchOutcome.from_slots(failures)
        joined.set_result(outcome)

    for index, signal in pending.items():
        signal.add_done_callback(partial(settle, index))
    return joined
