"""Record source protocol and in-memory adapters.

A record source yields one record per ``fetch_next`` call and ``None``
once the timeline is exhausted.
"""

from __future__ import annotations

from functools import partial
from typing import (
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
    Iterator,
    Mapping,
    Protocol,
    Union,
)

from core.types import Record

SourceItem = Union[Record, Mapping[str, object]]


class RecordSource(Protocol):
    """Upstream enumerator of timeline records."""

    async def fetch_next(self) -> SourceItem | None:
        """Return the next record, or None at end of sequence.

        Raises:
            FetchError: On I/O or protocol failure.
        """


class IterableRecordSource:
    """Adapt a sync or async iterable of records to ``RecordSource``."""

    def __init__(self, records: Iterable[SourceItem] | AsyncIterable[SourceItem]) -> None:
        self._fetch: Callable[[], Awaitable[SourceItem | None]]
        if isinstance(records, AsyncIterable):
            self._fetch = partial(_next_async, records.__aiter__())
        else:
            self._fetch = partial(_next_sync, iter(records))

    async def fetch_next(self) -> SourceItem | None:
        """Return the next record from the wrapped iterable."""
        return await self._fetch()


async def _next_async(iterator: AsyncIterator[SourceItem]) -> SourceItem | None:
    try:
        return await iterator.__anext__()
    except StopAsyncIteration:
        return None


async def _next_sync(iterator: Iterator[SourceItem]) -> SourceItem | None:
    return next(iterator, None)
