"""Unit tests for iterable record source adapters."""

from __future__ import annotations

from typing import AsyncIterator

import pytest

from core.types import Record
from ingest.record_source import IterableRecordSource
from tests.fakes import sample_records


@pytest.mark.asyncio
async def test_iterable_source_yields_records_then_none() -> None:
    """Sync iterables should be served one record per fetch."""
    source = IterableRecordSource(sample_records())

    fetched = [await source.fetch_next() for _ in range(3)]

    assert fetched == [*sample_records(), None]


@pytest.mark.asyncio
async def test_iterable_source_adapts_async_iterables() -> None:
    """Async iterables should be drained through the same protocol."""

    async def _records() -> AsyncIterator[Record]:
        for record in sample_records():
            yield record

    source = IterableRecordSource(_records())

    assert await source.fetch_next() == sample_records()[0]
    assert await source.fetch_next() == sample_records()[1]
    assert await source.fetch_next() is None
    assert await source.fetch_next() is None


@pytest.mark.asyncio
async def test_iterable_source_keeps_returning_none_when_exhausted() -> None:
    """Sync sources should signal end of sequence on every later fetch."""
    source = IterableRecordSource([])

    assert await source.fetch_next() is None
    assert await source.fetch_next() is None
