"""Application builders for route-level tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from realtime_proxy.handlers.connections import PairRegistry
from realtime_proxy.handlers.websocket import RelaySettings, UpstreamConnector
from realtime_proxy.providers import GeminiClient, OpenAIChatClient
from realtime_proxy.server import create_app

GEMINI_TEST_BASE = "https://gemini.test/v1beta"
OPENAI_TEST_URL = "https://openai.test/v1/chat/completions"

TEST_SETTINGS = RelaySettings(
    upstream_url="wss://upstream.test/v1/realtime",
    api_key="sk-test-1234",
    close_grace_s=0.2,
)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected provider call: {request.url}")


def build_app(
    *,
    settings: RelaySettings = TEST_SETTINGS,
    connector: UpstreamConnector | None = None,
    registry: PairRegistry | None = None,
    provider_handler: Callable[[httpx.Request], httpx.Response] = _unreachable,
    gemini_key: str = "g-key-5678",
    openai_key: str = "sk-chat-9999",
):
    """Build the app with injected relay collaborators and mocked providers."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(provider_handler))
    return create_app(
        settings,
        connector=connector,
        registry=registry if registry is not None else PairRegistry(),
        gemini=GeminiClient(http, api_key=gemini_key, api_base=GEMINI_TEST_BASE),
        openai_chat=OpenAIChatClient(http, api_key=openai_key, url=OPENAI_TEST_URL, max_tokens=1024),
    )
