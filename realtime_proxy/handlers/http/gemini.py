"""Gemini-backed JSON routes.

    POST /gemini/chat       {model?, text, system?, generationConfig?} -> {ok, text}
    POST /gemini/translate  {model?, text, targetLang?}                -> {ok, text}
    POST /gemini/semantics  {model?, text, maxOutputTokens?}
                            -> {ok, intent, slots, confidence, brief, raw}
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse

from ...config.providers import (
    GEMINI_DEFAULT_MAX_OUTPUT_TOKENS,
    GEMINI_DEFAULT_MODEL,
    GEMINI_DEFAULT_TARGET_LANG,
)
from ...errors import ValidationError
from ...helpers.json_extract import parse_json_object
from ...helpers.redact import safe_key_suffix
from ...providers.gemini import GeminiClient
from ...providers.prompts import (
    SEMANTICS_SYSTEM_PROMPT,
    build_semantics_prompt,
    build_translate_prompt,
)
from .body import int_field, read_json_body, text_field
from .responses import json_ok

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gemini")


def _client(request: Request) -> GeminiClient:
    return request.app.state.gemini


def _coerce_confidence(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def normalize_semantics(raw_text: str) -> dict[str, Any]:
    """Turn a model reply into the semantics envelope fields.

    Replies without a parseable JSON object map to the ``unknown`` intent
    with ``brief="parse_error"``.
    """
    parsed = parse_json_object(raw_text)
    if parsed is None:
        return {
            "intent": "unknown",
            "slots": {},
            "confidence": 0,
            "brief": "parse_error",
            "raw": raw_text,
        }
    slots = parsed.get("slots")
    return {
        "intent": str(parsed.get("intent") or "unknown").strip().lower(),
        "slots": slots if isinstance(slots, dict) else {},
        "confidence": _coerce_confidence(parsed.get("confidence")),
        "brief": str(parsed.get("brief") or ""),
        "raw": raw_text,
    }


@router.post("/chat")
async def gemini_chat(request: Request) -> ORJSONResponse:
    body = await read_json_body(request)
    client = _client(request)
    model = body.get("model") or GEMINI_DEFAULT_MODEL
    text = body.get("text") or ""
    generation_config = body.get("generationConfig") or {"maxOutputTokens": GEMINI_DEFAULT_MAX_OUTPUT_TOKENS}

    logger.info(
        "/gemini/chat model=%s textLen=%s key=%s",
        model,
        len(str(text)),
        safe_key_suffix(client.api_key),
    )
    result = await client.generate_content(
        model=model,
        text=text,
        system=body.get("system") or "",
        generation_config=generation_config,
    )
    return json_ok(text=result.text)


@router.post("/translate")
async def gemini_translate(request: Request) -> ORJSONResponse:
    body = await read_json_body(request)
    client = _client(request)
    model = body.get("model") or GEMINI_DEFAULT_MODEL
    text = str(body.get("text") or "")
    target_lang = text_field(body, "targetLang", GEMINI_DEFAULT_TARGET_LANG)

    logger.info(
        "/gemini/translate model=%s target=%s textLen=%s key=%s",
        model,
        target_lang,
        len(text),
        safe_key_suffix(client.api_key),
    )
    result = await client.generate_content(
        model=model,
        text=build_translate_prompt(text, target_lang),
        generation_config={"maxOutputTokens": GEMINI_DEFAULT_MAX_OUTPUT_TOKENS},
    )
    return json_ok(text=result.text)


@router.post("/semantics")
async def gemini_semantics(request: Request) -> ORJSONResponse:
    body = await read_json_body(request)
    client = _client(request)
    model = body.get("model") or GEMINI_DEFAULT_MODEL
    user_text = text_field(body, "text")
    max_output_tokens = int_field(body, "maxOutputTokens", GEMINI_DEFAULT_MAX_OUTPUT_TOKENS)
    if not user_text:
        raise ValidationError("missing_text", "Missing text")

    logger.info(
        "/gemini/semantics model=%s textLen=%s key=%s",
        model,
        len(user_text),
        safe_key_suffix(client.api_key),
    )
    result = await client.generate_content(
        model=model,
        text=build_semantics_prompt(user_text),
        system=SEMANTICS_SYSTEM_PROMPT,
        generation_config={"maxOutputTokens": max_output_tokens},
    )
    return json_ok(**normalize_semantics(result.text or ""))


__all__ = ["router", "normalize_semantics"]
