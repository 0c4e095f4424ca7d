"""Core constants used across timeline export modules.

This module centralizes defaults and format literals.
Keeping values here avoids magic literals in formatting logic.
"""

from __future__ import annotations

TEXT_ENCODING = "utf-8"
DEFAULT_CONTEXT_LABEL = "Timeline"
EVENT_TITLE_PREFIX = "Event at"
HUMAN_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
MARKDOWN_SECTION_DIVIDER = "\n---\n\n"
FALLBACK_FIELD_NAME = "text"
DEFAULT_PAGE_FORMAT = "A4"
DEFAULT_PAGE_MARGIN = "2cm"
DEFAULT_PRINT_BACKGROUNDS = True
SUPPORTED_PAGE_FORMATS = ("A3", "A4", "A5", "Letter", "Legal", "Tabloid")
SUPPORTED_MARGIN_UNITS = ("mm", "cm", "in", "pt", "px")
TEMPLATES_DIR_NAME = "templates"
TIMELINE_TEMPLATE_NAME = "timeline.html.j2"
FIELDS_TEMPLATE_NAME = "fields.html.j2"
TEXT_DOCUMENT_TEMPLATE_NAME = "text_document.html.j2"
ENV_PREFIX = "TIMELINE_EXPORT_"
