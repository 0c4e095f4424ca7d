"""Runtime configuration model for timeline export.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from core.constants import (
    DEFAULT_CONTEXT_LABEL,
    DEFAULT_PAGE_FORMAT,
    DEFAULT_PAGE_MARGIN,
    DEFAULT_PRINT_BACKGROUNDS,
    ENV_PREFIX,
    SUPPORTED_MARGIN_UNITS,
    SUPPORTED_PAGE_FORMATS,
)
from core.errors import ConfigError
from core.types import PageMargins, RenderOptions

_MARGIN_PATTERN = re.compile(
    r"^\d+(\.\d+)?(" + "|".join(SUPPORTED_MARGIN_UNITS) + r")$"
)
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class ExportConfig:
    """Validated runtime configuration.

    Attributes:
        page_format: Named page size for PDF output.
        margins: Page margins for PDF output.
        print_backgrounds: Whether PDF output renders CSS backgrounds.
        default_title: Context label used when a pipeline is given none.
    """

    page_format: str = DEFAULT_PAGE_FORMAT
    margins: PageMargins = PageMargins(
        top=DEFAULT_PAGE_MARGIN,
        right=DEFAULT_PAGE_MARGIN,
        bottom=DEFAULT_PAGE_MARGIN,
        left=DEFAULT_PAGE_MARGIN,
    )
    print_backgrounds: bool = DEFAULT_PRINT_BACKGROUNDS
    default_title: str = DEFAULT_CONTEXT_LABEL

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        page_format = _parse_page_format(_read_env("PAGE_FORMAT", DEFAULT_PAGE_FORMAT))
        base_margin = _parse_margin("MARGIN", _read_env("MARGIN", DEFAULT_PAGE_MARGIN))
        margins = PageMargins(
            top=_parse_margin("MARGIN_TOP", _read_env("MARGIN_TOP", base_margin)),
            right=_parse_margin("MARGIN_RIGHT", _read_env("MARGIN_RIGHT", base_margin)),
            bottom=_parse_margin("MARGIN_BOTTOM", _read_env("MARGIN_BOTTOM", base_margin)),
            left=_parse_margin("MARGIN_LEFT", _read_env("MARGIN_LEFT", base_margin)),
        )
        print_backgrounds = _parse_bool(
            "PRINT_BACKGROUNDS",
            _read_env("PRINT_BACKGROUNDS", str(DEFAULT_PRINT_BACKGROUNDS)),
        )
        default_title = _read_env("DEFAULT_TITLE", DEFAULT_CONTEXT_LABEL).strip()
        if not default_title:
            raise ConfigError(
                f"Invalid {ENV_PREFIX}DEFAULT_TITLE value: expected non-empty text. "
                f"Unset it to use '{DEFAULT_CONTEXT_LABEL}'."
            )
        return cls(
            page_format=page_format,
            margins=margins,
            print_backgrounds=print_backgrounds,
            default_title=default_title,
        )

    def render_options(self) -> RenderOptions:
        """Build engine render options from this config."""
        return RenderOptions(
            page_format=self.page_format,
            margins=self.margins,
            print_backgrounds=self.print_backgrounds,
        )


def _read_env(suffix: str, default: str) -> str:
    """Read one prefixed environment variable."""
    return os.getenv(f"{ENV_PREFIX}{suffix}", default)


def _parse_page_format(raw_value: str) -> str:
    """Parse a page format name case-insensitively.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Canonical page format name.

    Raises:
        ConfigError: If the format is unsupported.
    """
    by_lower_name = {name.lower(): name for name in SUPPORTED_PAGE_FORMATS}
    page_format = by_lower_name.get(raw_value.strip().lower())
    if page_format is None:
        raise ConfigError(
            f"Invalid {ENV_PREFIX}PAGE_FORMAT value: got '{raw_value}'. "
            f"Supported formats: {SUPPORTED_PAGE_FORMATS}."
        )
    return page_format


def _parse_margin(suffix: str, raw_value: str) -> str:
    """Parse a CSS length margin value.

    Args:
        suffix: Environment variable suffix for error context.
        raw_value: Raw string from environment.

    Returns:
        Normalized margin string.

    Raises:
        ConfigError: If the value is not a supported CSS length.
    """
    margin = raw_value.strip().lower()
    if not _MARGIN_PATTERN.match(margin):
        raise ConfigError(
            f"Invalid {ENV_PREFIX}{suffix} value: expected a length such as '2cm', "
            f"got '{raw_value}'. Supported units: {SUPPORTED_MARGIN_UNITS}."
        )
    return margin


def _parse_bool(suffix: str, raw_value: str) -> bool:
    """Parse a boolean flag environment value.

    Raises:
        ConfigError: If value is not a recognized boolean literal.
    """
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid {ENV_PREFIX}{suffix} value: expected true or false, got '{raw_value}'."
    )
