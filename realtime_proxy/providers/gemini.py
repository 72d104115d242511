"""Gemini ``generateContent`` client.

The API key travels in the ``x-goog-api-key`` header so it never ends up in
URLs, access logs or error messages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from ..errors import ProviderError
from .http import decode_json_body, truncate_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeminiResult:
    text: str
    raw: Any


def extract_gemini_text(payload: Any) -> str:
    """Join the text parts of the first candidate; "" when absent."""
    if not isinstance(payload, dict):
        return ""
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        return ""
    texts = [
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    return "".join(texts).strip()


class GeminiClient:
    """Thin async wrapper around the Gemini REST API."""

    def __init__(self, http: httpx.AsyncClient, *, api_key: str, api_base: str) -> None:
        self._http = http
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def build_payload(
        self,
        text: str,
        system: str | None = None,
        generation_config: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": text}]}],
        }
        if isinstance(system, str) and system.strip():
            payload["systemInstruction"] = {"parts": [{"text": system.strip()}]}
        if isinstance(generation_config, dict):
            payload["generationConfig"] = generation_config
        return payload

    async def generate_content(
        self,
        *,
        model: str,
        text: str,
        system: str | None = None,
        generation_config: dict[str, Any] | None = None,
    ) -> GeminiResult:
        """Run one generation and return the joined candidate text.

        Raises:
            ProviderError: 500 when the key is missing, 400 for a missing
                model or text, 502 when Gemini answers non-2xx.
        """
        if not self.api_key:
            raise ProviderError("Missing env GEMINI_API_KEY", status_code=500)
        if not model or not isinstance(model, str):
            raise ProviderError("Missing model", status_code=400)
        if not text or not isinstance(text, str):
            raise ProviderError("Missing text", status_code=400)

        url = f"{self.api_base}/models/{quote(model, safe='')}:generateContent"
        try:
            response = await self._http.post(
                url,
                json=self.build_payload(text, system, generation_config),
                headers={"x-goog-api-key": self.api_key},
            )
        except httpx.HTTPError as exc:
            raise ProviderError(f"Gemini request failed: {exc}", status_code=502) from exc

        raw = response.text
        payload = decode_json_body(raw)
        if not response.is_success:
            logger.warning("gemini non-2xx status=%s model=%s", response.status_code, model)
            raise ProviderError(
                f"Gemini HTTP {response.status_code}",
                status_code=502,
                upstream_status=response.status_code,
                upstream_body=truncate_body(raw),
            )
        return GeminiResult(text=extract_gemini_text(payload), raw=payload)


__all__ = ["GeminiClient", "GeminiResult", "extract_gemini_text"]
