"""Response envelopes shared by the HTTP routes.

Success:  {"ok": true, ...fields}
Failure:  {"ok": false, "error": "...", "upstreamStatus"?: int, "upstreamBody"?: str}

Every response carries ``cache-control: no-store``.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import ORJSONResponse, PlainTextResponse

NO_STORE_HEADERS = {"cache-control": "no-store"}


def json_ok(**fields: Any) -> ORJSONResponse:
    return ORJSONResponse({"ok": True, **fields}, headers=NO_STORE_HEADERS)


def json_error(
    status_code: int,
    message: str,
    *,
    upstream_status: int | None = None,
    upstream_body: str | None = None,
) -> ORJSONResponse:
    payload: dict[str, Any] = {"ok": False, "error": message or "error"}
    if upstream_status is not None:
        payload["upstreamStatus"] = upstream_status
    if upstream_body is not None:
        payload["upstreamBody"] = upstream_body
    return ORJSONResponse(payload, status_code=status_code, headers=NO_STORE_HEADERS)


def text_response(text: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(text, status_code=status_code, headers=NO_STORE_HEADERS)


__all__ = ["NO_STORE_HEADERS", "json_ok", "json_error", "text_response"]
