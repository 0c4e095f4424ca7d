"""Timeline export exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Stage failures carry the pipeline stage that raised them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.types import Stage


class TimelineExportError(Exception):
    """Base exception for all timeline export failures."""


class ConfigError(TimelineExportError):
    """Raised for invalid runtime configuration or builder arguments."""


class DependencyError(TimelineExportError):
    """Raised when an optional runtime dependency is missing."""


class StageError(TimelineExportError):
    """Base exception for failures of one pipeline stage.

    Attributes:
        stage: Stage whose computation failed.
        detail: Human-readable failure description.
    """

    def __init__(self, stage: "Stage", detail: str) -> None:
        super().__init__(f"{stage.value} stage failed: {detail}")
        self.stage = stage
        self.detail = detail


class FetchError(StageError):
    """Raised when the upstream record source fails."""


class FormatError(StageError):
    """Raised when a formatter fails while transforming records."""


class RenderError(StageError):
    """Raised when the document-rendering engine fails."""
