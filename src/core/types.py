"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
render, and pipeline layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence


class Stage(str, Enum):
    """Output representations a conversion pipeline can produce.

    Members are declared in dependency order.
    """

    RAW_RECORDS = "raw_records"
    STRUCTURED_TEXT = "markdown"
    STYLED_MARKUP = "html"
    PAGINATED_DOCUMENT = "pdf"


@dataclass(frozen=True)
class Record:
    """One timestamped timeline event.

    Attributes:
        time: Timestamp string, usually epoch milliseconds.
        value: Opaque string payload.
    """

    time: str
    value: str


@dataclass(frozen=True)
class PageMargins:
    """Page margins as CSS length strings.

    Attributes:
        top: Top margin.
        right: Right margin.
        bottom: Bottom margin.
        left: Left margin.
    """

    top: str
    right: str
    bottom: str
    left: str


@dataclass(frozen=True)
class RenderOptions:
    """Options handed to the document-rendering engine.

    Attributes:
        page_format: Named page size such as ``A4`` or ``Letter``.
        margins: Page margins.
        print_backgrounds: Whether CSS backgrounds are rendered.
    """

    page_format: str
    margins: PageMargins
    print_backgrounds: bool


Formatter = Callable[[Sequence[Record], str], str]
