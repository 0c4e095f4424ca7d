"""Field-projecting formatter builders.

Each builder returns a formatter that renders only selected fields of
JSON record payloads, one line per field in caller order.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import FALLBACK_FIELD_NAME, FIELDS_TEMPLATE_NAME
from core.errors import ConfigError
from core.types import Formatter, Record
from transforms.html_templates import render_template
from transforms.markdown_format import join_markdown_sections, markdown_section
from transforms.payload_parsing import FallbackPayload, field_text, parse_payload
from transforms.timestamps import event_title


def build_structured_text_field_formatter(fields: Sequence[str]) -> Formatter:
    """Build a Markdown formatter projecting selected payload fields.

    Args:
        fields: Ordered field names to render.

    Returns:
        Formatter emitting one Markdown bullet per field per record.

    Raises:
        ConfigError: If ``fields`` is empty or holds non-string names.
    """
    field_names = _validate_fields(fields)

    def _format(records: Sequence[Record], context_label: str) -> str:
        _ = context_label
        sections = []
        for record in records:
            lines = [
                f"- **{name}**: {value}" for name, value in project_fields(record, field_names)
            ]
            sections.append(markdown_section(record.time, "\n".join(lines)))
        return join_markdown_sections(sections)

    return _format


def build_styled_markup_field_formatter(fields: Sequence[str]) -> Formatter:
    """Build an HTML formatter projecting selected payload fields.

    Args:
        fields: Ordered field names to render.

    Returns:
        Formatter emitting one list item per field per record.

    Raises:
        ConfigError: If ``fields`` is empty or holds non-string names.
    """
    field_names = _validate_fields(fields)

    def _format(records: Sequence[Record], context_label: str) -> str:
        sections = [
            {
                "title": event_title(record.time),
                "fields": project_fields(record, field_names),
            }
            for record in records
        ]
        return render_template(FIELDS_TEMPLATE_NAME, title=context_label, sections=sections)

    return _format


def project_fields(record: Record, field_names: Sequence[str]) -> list[tuple[str, str]]:
    """Project a record payload onto ordered ``(name, value)`` pairs.

    Unparseable payloads yield a single fallback field with the raw value.
    """
    payload = parse_payload(record.value)
    if isinstance(payload, FallbackPayload):
        return [(FALLBACK_FIELD_NAME, payload.raw_text)]
    return [(name, field_text(payload, name)) for name in field_names]


def _validate_fields(fields: Sequence[str]) -> tuple[str, ...]:
    """Validate builder field names.

    Raises:
        ConfigError: If no fields are given or a name is not a string.
    """
    if isinstance(fields, str):
        raise ConfigError(
            f"Invalid field list '{fields}': expected a sequence of field names, "
            "not a single string. Wrap it in a list."
        )
    field_names = tuple(fields)
    if not field_names:
        raise ConfigError("Field list is empty. Provide at least one field name to render.")
    for name in field_names:
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Invalid field name {name!r}: expected non-empty text.")
    return field_names
