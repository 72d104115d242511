"""OpenAI chat route (same request/response shape as /gemini/chat).

    POST /openai/chat  {model?, text, system?} -> {ok, text}
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from ...config.providers import OPENAI_CHAT_DEFAULT_MODEL
from ...errors import ProviderError, ValidationError
from ...helpers.redact import safe_key_suffix
from ...providers.openai import OpenAIChatClient
from .body import read_json_body, text_field
from .responses import json_ok

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/openai")


@router.post("/chat")
async def openai_chat(request: Request) -> ORJSONResponse:
    client: OpenAIChatClient = request.app.state.openai_chat
    if not client.api_key:
        raise ProviderError("Missing env OPENAI_API_KEY", status_code=500)

    body = await read_json_body(request)
    model = text_field(body, "model", OPENAI_CHAT_DEFAULT_MODEL)
    text = text_field(body, "text")
    system = text_field(body, "system")
    if not text:
        raise ValidationError("missing_text", "Missing text")

    logger.info(
        "/openai/chat model=%s textLen=%s key=%s",
        model,
        len(text),
        safe_key_suffix(client.api_key),
    )
    content = await client.complete(model=model, text=text, system=system or None)
    return json_ok(text=content)


__all__ = ["router"]
