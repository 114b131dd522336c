"""Completion signal returned by event dispatch."""

from __future__ import annotations

import asyncio
import concurrent.futures
from dataclasses import dataclass
from typing import Any, Callable, Generator, Iterable

from .exceptions import AggregateDispatchError


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Result of one dispatch: failures in subscription order, empty on success."""

    errors: tuple[Exception, ...] = ()
    dispatched: int = 0

    @classmethod
    def from_slots(cls, slots: Iterable[Exception | None]) -> "DispatchOutcome":
        slots = list(slots)
        return cls(
            errors=tuple(error for error in slots if error is not None),
            dispatched=len(slots),
        )

    @property
    def succeeded(self) -> bool:
        return not self.errors

    @property
    def primary(self) -> Exception | None:
        """First failure in subscription order."""
        return self.errors[0] if self.errors else None

    def raise_primary(self) -> None:
        if self.errors:
            raise self.errors[0]

    def as_error(self) -> Exception | None:
        """The primary failure alone, or every failure grouped when there are several."""
        if len(self.errors) > 1:
            return self._grouped()
        return self.primary

    def raise_for_failures(self) -> None:
        """Raise every failure at once as an :class:`AggregateDispatchError`."""
        if self.errors:
            raise self._grouped()

    def _grouped(self) -> AggregateDispatchError:
        return AggregateDispatchError(
            f"{len(self.errors)} of {self.dispatched} handlers failed",
            list(self.errors),
        )


class Completion:
    """Awaitable join of a dispatch.

    Resolves once every handler started by the dispatch has finished. Awaiting
    returns ``None`` on success and raises the primary failure otherwise; the
    full list stays available through :meth:`exceptions` and :meth:`outcome`.
    Awaiting is shielded, so cancelling the waiter leaves the handlers running.
    """

    __slots__ = ("_future", "_outcome")

    def __init__(
        self,
        future: (
            asyncio.Future[DispatchOutcome] | concurrent.futures.Future[DispatchOutcome] | None
        ) = None,
        *,
        outcome: DispatchOutcome | None = None,
    ) -> None:
        if (future is None) == (outcome is None):
            raise ValueError("Completion needs exactly one of future or outcome")
        self._future = future
        self._outcome = outcome

    @classmethod
    def completed(cls, dispatched: int = 0) -> "Completion":
        return cls(outcome=DispatchOutcome(dispatched=dispatched))

    @classmethod
    def failed(cls, error: Exception) -> "Completion":
        return cls(outcome=DispatchOutcome(errors=(error,), dispatched=1))

    def done(self) -> bool:
        return self._outcome is not None or self._future.done()

    def outcome(self) -> DispatchOutcome:
        if self._outcome is None:
            if not self._future.done():
                raise asyncio.InvalidStateError("Dispatch is still running")
            self._outcome = self._future.result()
        return self._outcome

    def result(self) -> None:
        self.outcome().raise_primary()

    def exception(self) -> Exception | None:
        return self.outcome().primary

    def exceptions(self) -> tuple[Exception, ...]:
        return self.outcome().errors

    def add_done_callback(self, callback: Callable[["Completion"], Any]) -> None:
        """Call ``callback(self)`` once resolved, immediately if already resolved."""
        if self._future is None:
            callback(self)
            return
        self._future.add_done_callback(lambda _: callback(self))

    def __await__(self) -> Generator[Any, None, None]:
        if self._outcome is None:
            future = self._future
            if isinstance(future, concurrent.futures.Future):
                future = asyncio.wrap_future(future)
            yield from asyncio.shield(future).__await__()
        self.outcome().raise_primary()

    def __repr__(self) -> str:
        if not self.done():
            return "<Completion pending>"
        outcome = self.outcome()
        if outcome.succeeded:
            return f"<Completion succeeded dispatched={outcome.dispatched}>"
        return f"<Completion failed errors={len(outcome.errors)} dispatched={outcome.dispatched}>"
