"""Record collection from upstream timeline sources.

This module drains a record source into one ordered, immutable tuple.
Fetches run sequentially so emission order is preserved.
"""

from __future__ import annotations

from typing import Mapping

from core.deferred import Deferred
from core.errors import FetchError
from core.logging_config import get_logger
from core.types import Record, Stage
from ingest.record_source import RecordSource, SourceItem

_LOGGER = get_logger(__name__)


def collect_records(source: RecordSource) -> Deferred[tuple[Record, ...]]:
    """Build a deferred record sequence drained from a source.

    Nothing is fetched until the deferred is first awaited.

    Args:
        source: Upstream record source.

    Returns:
        Deferred resolving to all records in emission order.
    """
    return Deferred(lambda: _drain_source(source), Stage.RAW_RECORDS.value)


async def _drain_source(source: RecordSource) -> tuple[Record, ...]:
    """Fetch records until the source signals end of sequence.

    Args:
        source: Upstream record source.

    Returns:
        Collected records.

    Raises:
        FetchError: If any fetch fails or yields a malformed item.
    """
    records: list[Record] = []
    while True:
        try:
            item = await source.fetch_next()
        except FetchError:
            raise
        except Exception as error:
            raise FetchError(
                Stage.RAW_RECORDS,
                f"record source raised {type(error).__name__} after "
                f"{len(records)} records: {error}",
            ) from error
        if item is None:
            break
        records.append(_coerce_record(item, len(records)))
    _LOGGER.info("records_collected", record_count=len(records))
    return tuple(records)


def _coerce_record(item: SourceItem, index: int) -> Record:
    """Normalize one source item into a Record.

    Args:
        item: Record instance or mapping with ``time`` and ``value`` keys.
        index: Zero-based position for error context.

    Returns:
        Normalized record.

    Raises:
        FetchError: If the item is not record-shaped.
    """
    if isinstance(item, Record):
        return item
    if isinstance(item, Mapping) and "time" in item and "value" in item:
        value = item["value"]
        if not isinstance(value, str):
            raise FetchError(
                Stage.RAW_RECORDS,
                f"record {index} has a non-string value of type {type(value).__name__}.",
            )
        return Record(time=str(item["time"]), value=value)
    raise FetchError(
        Stage.RAW_RECORDS,
        f"record {index} is not record-shaped: expected 'time' and 'value' fields, "
        f"got {type(item).__name__}.",
    )
