"""Human-readable rendering of record timestamps."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from core.constants import EVENT_TITLE_PREFIX, HUMAN_TIMESTAMP_FORMAT


def format_timestamp(raw_time: str) -> str:
    """Render an epoch-milliseconds timestamp as UTC text.

    Args:
        raw_time: Record time string.

    Returns:
        ``YYYY-MM-DD HH:MM:SS UTC`` for numeric input, else ``raw_time`` verbatim.
    """
    try:
        milliseconds = float(raw_time)
    except ValueError:
        return raw_time
    if not math.isfinite(milliseconds):
        return raw_time
    try:
        moment = datetime.fromtimestamp(milliseconds / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return raw_time
    return moment.strftime(HUMAN_TIMESTAMP_FORMAT)


def event_title(raw_time: str) -> str:
    """Build the section title for one record."""
    return f"{EVENT_TITLE_PREFIX} {format_timestamp(raw_time)}"
