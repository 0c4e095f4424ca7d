"""Public SDK surface for timeline export.

This module provides a stable import path for pipeline users.
It re-exports the pipeline, formatter builders, and typed models.
"""

from __future__ import annotations

from core.config import ExportConfig
from core.errors import (
    ConfigError,
    DependencyError,
    FetchError,
    FormatError,
    RenderError,
    StageError,
    TimelineExportError,
)
from core.types import Formatter, PageMargins, Record, RenderOptions, Stage
from ingest.record_source import IterableRecordSource, RecordSource
from pipeline.conversion_pipeline import ConversionPipeline, create_pipeline
from render.document_renderer import DocumentRenderer, RendererFactory
from render.weasyprint_renderer import WeasyPrintRenderer
from transforms.field_formatters import (
    build_structured_text_field_formatter,
    build_styled_markup_field_formatter,
)
from transforms.html_format import records_to_html
from transforms.markdown_format import records_to_markdown

__all__ = [
    "ConfigError",
    "ConversionPipeline",
    "DependencyError",
    "DocumentRenderer",
    "ExportConfig",
    "FetchError",
    "FormatError",
    "Formatter",
    "IterableRecordSource",
    "PageMargins",
    "Record",
    "RecordSource",
    "RenderError",
    "RenderOptions",
    "RendererFactory",
    "Stage",
    "StageError",
    "TimelineExportError",
    "WeasyPrintRenderer",
    "build_structured_text_field_formatter",
    "build_styled_markup_field_formatter",
    "create_pipeline",
    "records_to_html",
    "records_to_markdown",
]
