"""WeasyPrint-backed PDF rendering engine.

Render options map onto an ``@page`` stylesheet. Rendering runs in a
worker thread so the event loop stays responsive.
"""

from __future__ import annotations

import asyncio
from typing import Any

from core.errors import DependencyError, RenderError
from core.types import RenderOptions, Stage

_NO_BACKGROUNDS_CSS = (
    "*, *::before, *::after { background: none !important; "
    "background-color: transparent !important; }"
)


class WeasyPrintRenderer:
    """PDF engine built on WeasyPrint."""

    def __init__(self) -> None:
        self._weasyprint: Any | None = _import_weasyprint()

    async def render(self, markup: str, options: RenderOptions) -> bytes:
        """Render HTML markup to PDF bytes.

        Args:
            markup: Complete HTML document.
            options: Page format, margins, and background policy.

        Returns:
            PDF document bytes.

        Raises:
            RenderError: If the engine is closed or WeasyPrint fails.
        """
        if self._weasyprint is None:
            raise RenderError(Stage.PAGINATED_DOCUMENT, "renderer was already closed.")
        return await asyncio.to_thread(_write_pdf, self._weasyprint, markup, options)

    async def close(self) -> None:
        """Release the WeasyPrint module handle."""
        self._weasyprint = None


def build_page_stylesheets(options: RenderOptions) -> list[str]:
    """Translate render options into CSS stylesheets.

    Args:
        options: Render options.

    Returns:
        CSS source strings applied on top of the document styles.
    """
    margins = options.margins
    stylesheets = [
        "@page { "
        f"size: {options.page_format}; "
        f"margin: {margins.top} {margins.right} {margins.bottom} {margins.left}; "
        "}"
    ]
    if not options.print_backgrounds:
        stylesheets.append(_NO_BACKGROUNDS_CSS)
    return stylesheets


def _write_pdf(weasyprint: Any, markup: str, options: RenderOptions) -> bytes:
    """Render a document synchronously with WeasyPrint."""
    stylesheets = [weasyprint.CSS(string=css) for css in build_page_stylesheets(options)]
    try:
        pdf_bytes = weasyprint.HTML(string=markup).write_pdf(stylesheets=stylesheets)
    except Exception as error:
        raise RenderError(
            Stage.PAGINATED_DOCUMENT,
            f"WeasyPrint raised {type(error).__name__}: {error}",
        ) from error
    return bytes(pdf_bytes)


def _import_weasyprint() -> Any:
    """Import WeasyPrint lazily.

    Raises:
        DependencyError: If WeasyPrint or its system libraries are missing.
    """
    try:
        import weasyprint
    except (ImportError, OSError) as error:
        raise DependencyError(
            "PDF output requires weasyprint and its Pango system libraries, "
            f"but loading failed: {error}. Install weasyprint to render PDF documents."
        ) from error
    return weasyprint
