"""Recover JSON objects embedded in free-form model output.

Models asked for "JSON only" still wrap the object in prose or markdown
fences now and then. The scanner below finds the first balanced ``{...}``
span while ignoring braces that appear inside string literals.
"""

from __future__ import annotations

import json
from typing import Any


def extract_first_json_object(text: str | None) -> str | None:
    """Return the first balanced JSON object substring, or None."""
    source = str(text or "").strip()
    if not source:
        return None

    start = source.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escape = False
    for index in range(start, len(source)):
        char = source[index]
        if in_string:
            if escape:
                escape = False
            elif char == "\\":
                escape = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return source[start:index + 1]
    return None


def parse_json_object(text: str | None) -> dict[str, Any] | None:
    """Parse the first embedded JSON object, falling back to the whole text.

    Returns None unless the result is a JSON object.
    """
    candidate = extract_first_json_object(text) or str(text or "").strip()
    try:
        parsed = json.loads(candidate)
    except (TypeError, ValueError):
        return None
    return parsed if isinstance(parsed, dict) else None


__all__ = ["extract_first_json_object", "parse_json_object"]
