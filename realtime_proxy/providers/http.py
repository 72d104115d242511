"""Shared HTTP plumbing for provider clients."""

from __future__ import annotations

import json
from typing import Any

import httpx

from ..config.providers import PROVIDER_ERROR_BODY_MAX_CHARS, PROVIDER_TIMEOUT_S


def create_http_client(timeout_s: float = PROVIDER_TIMEOUT_S, **kwargs: Any) -> httpx.AsyncClient:
    """Build the process-wide async client used by every provider."""
    return httpx.AsyncClient(timeout=timeout_s, **kwargs)


def decode_json_body(raw: str) -> Any:
    """Parse a provider body, returning None when it is not JSON."""
    try:
        return json.loads(raw)
    except ValueError:
        return None


def truncate_body(raw: str | None) -> str:
    return (raw or "")[:PROVIDER_ERROR_BODY_MAX_CHARS]


__all__ = ["create_http_client", "decode_json_body", "truncate_body"]
