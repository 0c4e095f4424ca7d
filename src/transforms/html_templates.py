"""Jinja2 template loading for HTML output.

Templates live in the ``transforms/templates`` package directory and
share one layout that carries the minimal document styling.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from core.constants import TEMPLATES_DIR_NAME


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """Return the shared Jinja2 environment.

    Autoescaping is always on since record payloads are untrusted text.
    """
    return Environment(
        loader=PackageLoader("transforms", TEMPLATES_DIR_NAME),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_template(template_name: str, **context: Any) -> str:
    """Load and render a template with context.

    Args:
        template_name: Template file name inside the templates directory.
        **context: Variables passed to the template.

    Returns:
        Rendered HTML.
    """
    return template_environment().get_template(template_name).render(**context)
