"""Document-rendering engine contract.

Engines turn HTML into paginated document bytes. An engine instance is
created per render and must always be closed afterwards.
"""

from __future__ import annotations

from typing import Callable, Protocol

from core.types import RenderOptions


class DocumentRenderer(Protocol):
    """Engine rendering HTML markup into PDF bytes."""

    async def render(self, markup: str, options: RenderOptions) -> bytes:
        """Render markup into document bytes.

        Raises:
            RenderError: If the engine fails.
        """

    async def close(self) -> None:
        """Release engine resources."""


RendererFactory = Callable[[], DocumentRenderer]
