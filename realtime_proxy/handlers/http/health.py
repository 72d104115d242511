"""Liveness endpoint for deployment probes.

Answers from the process alone; relay state never affects it.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .responses import text_response

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
@router.get("/health", response_class=PlainTextResponse)
async def health() -> PlainTextResponse:
    """Plain-text ok (no authentication required)."""
    return text_response("ok")


__all__ = ["router"]
