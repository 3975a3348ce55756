"""
Parsing of generator output into validated schemas.

The generator's text is untrusted input.  It is parsed as JSON (once
as-is, once more after stripping a markdown code fence) and then validated
against the target schema.  Nothing is coerced or re-derived: a verdict
whose ``ui_color`` disagrees with its ``status`` is returned unchanged.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional, TypeVar

import pydantic
from pydantic import BaseModel

from app.core.errors import ParseError

T = TypeVar("T", bound=BaseModel)

_FENCE_OPEN = re.compile(r"^\s*```(?:json)?[ \t]*\n?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```\s*$")


def strip_code_fence(text: str) -> str:
    """Remove a leading ```/```json marker and a trailing ``` marker."""
    text = _FENCE_OPEN.sub("", text, count=1)
    text = _FENCE_CLOSE.sub("", text, count=1)
    return text.strip()


def _load_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass
    try:
        return json.loads(strip_code_fence(raw))
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"external response was not valid structured output: {raw[:50]!r}"
        ) from exc


def parse_structured_output(raw: Optional[str], schema: type[T]) -> T:
    """Parse generator text into ``schema``.

    Raises:
        ParseError: if the text is not JSON even after fence stripping, is
            not a JSON object, or fails schema validation.
    """
    if raw is None or not raw.strip():
        raise ParseError("external response was not valid structured output: empty text")

    payload = _load_json(raw)
    if not isinstance(payload, dict):
        raise ParseError("external response was not valid structured output: expected a JSON object")

    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in exc.errors())
        raise ParseError(
            f"external response was not valid structured output: invalid fields ({fields})"
        ) from exc
