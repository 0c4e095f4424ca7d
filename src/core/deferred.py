"""Memoized deferred computations on asyncio.

A deferred wraps a coroutine factory that runs at most once. The task is
created lazily on first await and shared by every later awaiter, so both
results and failures are memoized.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Deferred(Generic[T]):
    """A value computed once, on demand, and shared by all readers."""

    def __init__(self, factory: Callable[[], Awaitable[T]], name: str) -> None:
        self._factory: Callable[[], Awaitable[T]] | None = factory
        self._future: asyncio.Future[T] | None = None
        self.name = name

    @property
    def started(self) -> bool:
        """Return whether the computation has been scheduled."""
        return self._future is not None

    def then(
        self,
        continuation: Callable[[T], Awaitable[U] | U],
        name: str,
    ) -> "Deferred[U]":
        """Chain a continuation without scheduling anything.

        Args:
            continuation: Sync or async callable receiving this value.
            name: Name of the derived computation.

        Returns:
            Deferred resolving to the continuation result.
        """

        async def _run() -> U:
            value = await self.result()
            outcome = continuation(value)
            if inspect.isawaitable(outcome):
                return await outcome
            return outcome

        return Deferred(_run, name)

    async def result(self) -> T:
        """Await the memoized value, starting the computation if needed."""
        if self._future is None:
            factory, self._factory = self._factory, None
            if factory is None:
                raise RuntimeError(f"Deferred {self.name!r} lost its factory before starting.")
            self._future = asyncio.ensure_future(_await(factory))
        return await asyncio.shield(self._future)

    def __repr__(self) -> str:
        state = "pending"
        if self._future is not None:
            state = "done" if self._future.done() else "running"
        return f"Deferred({self.name!r}, {state})"


async def _await(factory: Callable[[], Awaitable[Any]]) -> Any:
    return await factory()
