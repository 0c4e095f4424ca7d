"""Default HTML formatter for timeline records.

Records render as titled sections inside a minimal styled document
whose heading is the pipeline context label.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import TEXT_DOCUMENT_TEMPLATE_NAME, TIMELINE_TEMPLATE_NAME
from core.types import Record
from transforms.html_templates import render_template
from transforms.timestamps import event_title


def records_to_html(records: Sequence[Record], context_label: str) -> str:
    """Render records as one styled HTML document.

    Args:
        records: Ordered timeline records.
        context_label: Document title.

    Returns:
        Complete HTML document.
    """
    sections = [
        {"title": event_title(record.time), "body": record.value} for record in records
    ]
    return render_template(TIMELINE_TEMPLATE_NAME, title=context_label, sections=sections)


def text_to_html(text: str, context_label: str) -> str:
    """Wrap plain text as a single-section HTML document.

    Line breaks in ``text`` become ``<br>`` elements; the text is escaped.

    Args:
        text: Structured text such as Markdown output.
        context_label: Document title.

    Returns:
        Complete HTML document.
    """
    return render_template(
        TEXT_DOCUMENT_TEMPLATE_NAME,
        title=context_label,
        lines=text.splitlines(),
    )
