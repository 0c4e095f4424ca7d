"""Record payload parsing for field projection.

Payloads are parsed as JSON objects. Anything else is carried through
as a fallback holding the raw text, so projection never fails on data.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Mapping, Union


@dataclass(frozen=True)
class ParsedPayload:
    """Payload that decoded to a JSON object."""

    fields: Mapping[str, object]


@dataclass(frozen=True)
class FallbackPayload:
    """Payload that is not a JSON object, kept verbatim."""

    raw_text: str


PayloadResult = Union[ParsedPayload, FallbackPayload]


def parse_payload(value: str) -> PayloadResult:
    """Parse a record value into a tagged payload result.

    Args:
        value: Raw record value.

    Returns:
        ParsedPayload for JSON objects, FallbackPayload otherwise.
    """
    try:
        decoded = json.loads(value)
    except (json.JSONDecodeError, RecursionError):
        return FallbackPayload(raw_text=value)
    if not isinstance(decoded, dict):
        return FallbackPayload(raw_text=value)
    return ParsedPayload(fields=decoded)


def field_text(payload: ParsedPayload, field_name: str) -> str:
    """Render one payload field as display text.

    Missing fields and JSON null render empty; strings render as-is and
    any other value renders as compact JSON.
    """
    value = payload.fields.get(field_name)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
