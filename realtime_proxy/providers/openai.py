"""OpenAI chat completions client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import ProviderError
from .http import decode_json_body, truncate_body

logger = logging.getLogger(__name__)


def build_messages(text: str, system: str | None = None) -> list[dict[str, str]]:
    messages: list[dict[str, str]] = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": text})
    return messages


def extract_chat_text(payload: Any) -> str:
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content.strip() if isinstance(content, str) else ""


def _error_message(payload: Any, raw: str, status: int) -> str:
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return raw[:500] or f"HTTP {status}"


class OpenAIChatClient:
    """Single-shot chat completion against the OpenAI REST API."""

    def __init__(self, http: httpx.AsyncClient, *, api_key: str, url: str, max_tokens: int) -> None:
        self._http = http
        self.api_key = api_key
        self.url = url
        self.max_tokens = max_tokens

    async def complete(self, *, model: str, text: str, system: str | None = None) -> str:
        """Return the first choice's message content, stripped.

        Raises:
            ProviderError: 500 when the key is missing, 502 on non-2xx.
        """
        if not self.api_key:
            raise ProviderError("Missing env OPENAI_API_KEY", status_code=500)

        try:
            response = await self._http.post(
                self.url,
                json={
                    "model": model,
                    "messages": build_messages(text, system),
                    "max_tokens": self.max_tokens,
                },
                headers={"authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}", status_code=502) from exc

        raw = response.text
        payload = decode_json_body(raw)
        if not response.is_success:
            status = response.status_code
            logger.warning("openai chat non-2xx status=%s model=%s", status, model)
            raise ProviderError(
                f"OpenAI HTTP {status}: {_error_message(payload, raw, status)}",
                status_code=502,
                upstream_status=status,
                upstream_body=truncate_body(raw),
            )
        return extract_chat_text(payload)


__all__ = ["OpenAIChatClient", "build_messages", "extract_chat_text"]
