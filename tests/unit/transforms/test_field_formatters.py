"""Unit tests for field-projecting formatter builders."""

from __future__ import annotations

import pytest

from core.errors import ConfigError
from core.types import Record
from transforms.field_formatters import (
    build_structured_text_field_formatter,
    build_styled_markup_field_formatter,
)


def _json_record() -> Record:
    return Record(time="1000", value='{"title":"A","description":"B","uri":"u"}')


def test_markdown_field_formatter_renders_fields_in_order() -> None:
    """Requested fields should render one line each, in caller order."""
    formatter = build_structured_text_field_formatter(["title", "description"])

    markdown = formatter([_json_record()], "news")

    lines = markdown.splitlines()
    title_index = lines.index("- **title**: A")
    description_index = lines.index("- **description**: B")
    assert title_index < description_index
    assert "uri" not in markdown


def test_markdown_field_formatter_renders_absent_fields_empty() -> None:
    """Absent fields should still render their name with an empty value."""
    formatter = build_structured_text_field_formatter(["title", "author"])

    markdown = formatter([_json_record()], "news")

    assert "- **author**: " in markdown.splitlines()


def test_markdown_field_formatter_falls_back_for_unparseable_values() -> None:
    """Unparseable payloads should render one fallback line per record."""
    formatter = build_structured_text_field_formatter(["title", "description"])
    records = [Record(time="1", value="plain text"), Record(time="2", value="{broken")]

    markdown = formatter(records, "news")

    assert markdown.count("- **text**: plain text") == 1
    assert markdown.count("- **text**: {broken") == 1
    assert "title" not in markdown
    assert markdown.count("\n---\n") == 1


def test_html_field_formatter_renders_list_items() -> None:
    """HTML field formatter should emit escaped list items in order."""
    formatter = build_styled_markup_field_formatter(["description", "title"])
    record = Record(time="1000", value='{"title":"<A>","description":"B"}')

    html = formatter([record], "feed")

    assert "<h1>feed</h1>" in html
    description_index = html.index("<strong>description:</strong>")
    title_index = html.index("<strong>title:</strong>")
    assert description_index < title_index
    assert "&lt;A&gt;" in html


def test_html_field_formatter_falls_back_for_unparseable_values() -> None:
    """HTML fallback should carry the raw value in one list item."""
    formatter = build_styled_markup_field_formatter(["title"])

    html = formatter([Record(time="1", value="oops")], "feed")

    assert html.count("<li>") == 1
    assert "<strong>text:</strong>" in html
    assert "oops" in html


@pytest.mark.parametrize("fields", [[], "title", ["title", ""]])
def test_builders_reject_invalid_field_lists(fields: object) -> None:
    """Builders should fail early for unusable field lists."""
    with pytest.raises(ConfigError):
        build_structured_text_field_formatter(fields)  # type: ignore[arg-type]
    with pytest.raises(ConfigError):
        build_styled_markup_field_formatter(fields)  # type: ignore[arg-type]


def test_markdown_field_formatter_falls_back_for_deeply_nested_values() -> None:
    """Unterminated deep nesting should render one fallback line, not raise."""
    formatter = build_structured_text_field_formatter(["title"])

    markdown = formatter([Record(time="1", value="[" * 100000)], "news")

    fallback_lines = [line for line in markdown.splitlines() if line.startswith("- **text**: ")]
    assert len(fallback_lines) == 1
    assert "- **title**" not in markdown
