"""Default Markdown formatter for timeline records.

Each record becomes one section titled by its timestamp, with sections
separated by a horizontal rule.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import MARKDOWN_SECTION_DIVIDER
from core.types import Record
from transforms.timestamps import event_title


def records_to_markdown(records: Sequence[Record], context_label: str) -> str:
    """Render records as Markdown sections.

    Args:
        records: Ordered timeline records.
        context_label: Pipeline context label, unused by this formatter.

    Returns:
        Combined Markdown document.
    """
    _ = context_label
    return join_markdown_sections(
        markdown_section(record.time, record.value) for record in records
    )


def markdown_section(raw_time: str, body: str) -> str:
    """Render one titled Markdown section."""
    return f"## {event_title(raw_time)}\n\n{body}\n"


def join_markdown_sections(sections: Iterable[str]) -> str:
    """Join rendered sections with the section divider."""
    return MARKDOWN_SECTION_DIVIDER.join(sections)
