"""Chainable conversion pipeline for timeline records.

The pipeline holds at most one deferred computation per stage. Stage
selection only registers computations; ``materialize`` forces the one
with the highest precedence and memoizes every stage it touches.
"""

from __future__ import annotations

from typing import Any, Sequence

from core.config import ExportConfig
from core.constants import TEXT_ENCODING
from core.deferred import Deferred
from core.errors import FormatError, RenderError, StageError
from core.logging_config import get_logger
from core.types import Formatter, Record, Stage
from ingest.record_collector import collect_records
from ingest.record_source import RecordSource
from render.document_renderer import RendererFactory
from render.weasyprint_renderer import WeasyPrintRenderer
from transforms.html_format import records_to_html, text_to_html
from transforms.markdown_format import records_to_markdown

_LOGGER = get_logger(__name__)

_RESOLUTION_PRECEDENCE = (
    Stage.PAGINATED_DOCUMENT,
    Stage.STYLED_MARKUP,
    Stage.STRUCTURED_TEXT,
)

PipelineOutput = Any


class ConversionPipeline:
    """Stateful, chainable conversion of a record source."""

    def __init__(
        self,
        record_source: RecordSource,
        context_label: str | None = None,
        *,
        config: ExportConfig | None = None,
        renderer_factory: RendererFactory | None = None,
    ) -> None:
        """Create a pipeline bound to a record source.

        Args:
            record_source: Upstream source drained on first materialize.
            context_label: Document title; defaults to ``config.default_title``.
            config: Optional runtime configuration.
            renderer_factory: Optional PDF engine factory, WeasyPrint by default.
        """
        self._config = config or ExportConfig.from_env()
        self.context_label = context_label or self._config.default_title
        self._renderer_factory: RendererFactory = renderer_factory or WeasyPrintRenderer
        self._records = collect_records(record_source)
        self._stages: dict[Stage, Deferred[Any]] = {Stage.RAW_RECORDS: self._records}

    @property
    def selected_stages(self) -> tuple[Stage, ...]:
        """Return selected stages in dependency order."""
        return tuple(
            stage for stage in Stage if stage in self._stages and stage is not Stage.RAW_RECORDS
        )

    def select_structured_text(self, formatter: Formatter | None = None) -> "ConversionPipeline":
        """Register the Markdown stage.

        Args:
            formatter: Optional Markdown formatter, default sections otherwise.

        Returns:
            This pipeline for chaining.
        """
        self._register_text_stage(Stage.STRUCTURED_TEXT, formatter, records_to_markdown)
        return self

    def select_styled_markup(self, formatter: Formatter | None = None) -> "ConversionPipeline":
        """Register the HTML stage.

        Args:
            formatter: Optional HTML formatter, default styled sections otherwise.

        Returns:
            This pipeline for chaining.
        """
        self._register_text_stage(Stage.STYLED_MARKUP, formatter, records_to_html)
        return self

    def select_paginated_document(self) -> "ConversionPipeline":
        """Register the PDF stage.

        The PDF renders from HTML when that stage is selected. With only
        Markdown selected, the Markdown text is wrapped in a one-section
        HTML document. With neither, the default HTML stage is selected first.

        Returns:
            This pipeline for chaining.
        """
        if Stage.PAGINATED_DOCUMENT in self._stages:
            return self
        if Stage.STRUCTURED_TEXT not in self._stages:
            self.select_styled_markup()
        if Stage.STYLED_MARKUP in self._stages:
            markup = self._stages[Stage.STYLED_MARKUP]
            source_stage = Stage.STYLED_MARKUP
        else:
            context_label = self.context_label
            markup = self._stages[Stage.STRUCTURED_TEXT].then(
                lambda text: text_to_html(text, context_label),
                "markdown_as_html",
            )
            source_stage = Stage.STRUCTURED_TEXT
        self._stages[Stage.PAGINATED_DOCUMENT] = markup.then(
            self._render_document, Stage.PAGINATED_DOCUMENT.value
        )
        _LOGGER.info(
            "stage_registered",
            stage=Stage.PAGINATED_DOCUMENT.value,
            source_stage=source_stage.value,
        )
        return self

    async def materialize(self) -> PipelineOutput:
        """Resolve the highest-precedence selected stage.

        Returns:
            PDF bytes, HTML bytes, or Markdown bytes, by that precedence;
            the raw record tuple when no stage was selected.

        Raises:
            FetchError: If the record source failed.
            FormatError: If a formatter failed.
            RenderError: If the PDF engine failed.
        """
        for stage in _RESOLUTION_PRECEDENCE:
            deferred = self._stages.get(stage)
            if deferred is None:
                continue
            output = await self._resolve(deferred)
            if stage is Stage.PAGINATED_DOCUMENT:
                return output
            return output.encode(TEXT_ENCODING)
        return await self._resolve(self._records)

    def _register_text_stage(
        self,
        stage: Stage,
        formatter: Formatter | None,
        default_formatter: Formatter,
    ) -> None:
        """Register a formatter stage once; later calls keep the first."""
        if stage in self._stages:
            if formatter is not None:
                _LOGGER.debug("stage_reselected_ignored", stage=stage.value)
            return
        chosen = formatter if formatter is not None else default_formatter
        context_label = self.context_label
        self._stages[stage] = self._records.then(
            lambda records: _run_formatter(stage, chosen, records, context_label),
            stage.value,
        )
        _LOGGER.info("stage_registered", stage=stage.value, formatter=_callable_name(chosen))

    async def _render_document(self, markup: str) -> bytes:
        """Render markup with a fresh engine, always releasing it."""
        renderer = self._renderer_factory()
        try:
            document = await renderer.render(markup, self._config.render_options())
        except RenderError:
            raise
        except Exception as error:
            raise RenderError(
                Stage.PAGINATED_DOCUMENT,
                f"renderer raised {type(error).__name__}: {error}",
            ) from error
        finally:
            await renderer.close()
        _LOGGER.info("document_rendered", byte_count=len(document))
        return document

    async def _resolve(self, deferred: Deferred[Any]) -> Any:
        try:
            return await deferred.result()
        except StageError as error:
            _LOGGER.error("stage_failed", stage=error.stage.value, error=str(error))
            raise

    def __repr__(self) -> str:
        stages = ", ".join(stage.value for stage in self.selected_stages) or "none"
        return f"ConversionPipeline(context_label={self.context_label!r}, stages=[{stages}])"


def create_pipeline(
    record_source: RecordSource,
    context_label: str | None = None,
    *,
    config: ExportConfig | None = None,
    renderer_factory: RendererFactory | None = None,
) -> ConversionPipeline:
    """Create a conversion pipeline bound to a record source.

    Args:
        record_source: Upstream record source.
        context_label: Optional document title.
        config: Optional runtime configuration.
        renderer_factory: Optional PDF engine factory.

    Returns:
        New pipeline with no stage selected.
    """
    return ConversionPipeline(
        record_source,
        context_label,
        config=config,
        renderer_factory=renderer_factory,
    )


def _run_formatter(
    stage: Stage,
    formatter: Formatter,
    records: Sequence[Record],
    context_label: str,
) -> str:
    """Apply a formatter, surfacing any failure as FormatError."""
    name = _callable_name(formatter)
    try:
        output = formatter(records, context_label)
    except FormatError:
        raise
    except Exception as error:
        raise FormatError(
            stage, f"formatter {name} raised {type(error).__name__}: {error}"
        ) from error
    if not isinstance(output, str):
        raise FormatError(
            stage, f"formatter {name} returned {type(output).__name__}, expected str."
        )
    _LOGGER.info("stage_completed", stage=stage.value, output_chars=len(output))
    return output


def _callable_name(function: object) -> str:
    return getattr(function, "__qualname__", None) or repr(function)
