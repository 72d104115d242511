"""JSON request body parsing for the provider routes."""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from ...config.http import HTTP_MAX_BODY_BYTES
from ...errors import PayloadTooLargeError, ValidationError


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {token}")


async def read_json_body(request: Request, max_bytes: int = HTTP_MAX_BODY_BYTES) -> dict[str, Any]:
    """Read a JSON object body, enforcing ``max_bytes`` while streaming.

    An empty body reads as ``{}``.

    Raises:
        PayloadTooLargeError: The body exceeded ``max_bytes``.
        ValidationError: The body is not a JSON object.
    """
    size = 0
    chunks: list[bytes] = []
    async for chunk in request.stream():
        size += len(chunk)
        if size > max_bytes:
            raise PayloadTooLargeError(max_bytes)
        chunks.append(chunk)

    text = b"".join(chunks).decode("utf-8", errors="replace").strip()
    if not text:
        return {}
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ValidationError("invalid_json", "invalid json") from exc
    if not isinstance(data, dict):
        raise ValidationError("invalid_json", "json body must be an object")
    return data


def text_field(body: dict[str, Any], name: str, default: str = "") -> str:
    """Return ``body[name]`` as stripped text, ``default`` when falsy."""
    value = body.get(name)
    if not value:
        return default
    return str(value).strip()


def int_field(body: dict[str, Any], name: str, default: int) -> int:
    value = body.get(name)
    if not value:
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


__all__ = ["read_json_body", "text_field", "int_field"]
