"""Main FastAPI server for the realtime proxy.

This module assembles the relay process. It provides:

- Plain-text health checks (/health, /)
- WebSocket relay to the realtime speech API on the reserved prefix (/realtime)
- JSON routes forwarding to Gemini and OpenAI chat
- CORS headers on every HTTP response
- Forced termination of every live pair on shutdown

Server Lifecycle:
    1. On import: configure logging and validate configuration
    2. Route WebSocket upgrades by path prefix (RealtimeAcceptor)
    3. Relay each accepted connection through its own ConnectionPair
    4. On shutdown: terminate outstanding pairs, close the HTTP client

Example:
    Run directly with uvicorn:
        $ uvicorn realtime_proxy.server:app --host 0.0.0.0 --port 10000

    Or through the package entry point:
        $ python -m realtime_proxy
"""

from __future__ import annotations

import functools
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from .config import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_ORIGINS,
    GEMINI_API_BASE,
    GEMINI_API_KEY,
    OPENAI_API_KEY,
    OPENAI_CHAT_MAX_TOKENS,
    OPENAI_CHAT_URL,
)
from .handlers.connections import PairRegistry, pairs
from .handlers.http import (
    gemini_router,
    health_router,
    openai_router,
    register_exception_handlers,
)
from .handlers.websocket import (
    RealtimeAcceptor,
    RelaySettings,
    UpstreamConnector,
    handle_realtime_connection,
)
from .helpers.redact import safe_key_suffix
from .helpers.validation import validate_env
from .logging import configure_logging
from .providers import GeminiClient, OpenAIChatClient, create_http_client

logger = logging.getLogger(__name__)

configure_logging()
validate_env()


def create_app(
    settings: RelaySettings | None = None,
    *,
    connector: UpstreamConnector | None = None,
    registry: PairRegistry | None = None,
    gemini: GeminiClient | None = None,
    openai_chat: OpenAIChatClient | None = None,
) -> FastAPI:
    """Build the ASGI application.

    Every collaborator can be injected so tests run against fake upstreams,
    mock HTTP transports and shortened relay timers.
    """
    settings = settings or RelaySettings.from_env()
    registry = registry if registry is not None else pairs

    app = FastAPI(default_response_class=ORJSONResponse)
    app.state.relay_settings = settings
    app.state.pairs = registry

    http_client = None
    if gemini is None or openai_chat is None:
        http_client = create_http_client()
    app.state.gemini = gemini or GeminiClient(
        http_client,
        api_key=GEMINI_API_KEY,
        api_base=GEMINI_API_BASE,
    )
    app.state.openai_chat = openai_chat or OpenAIChatClient(
        http_client,
        api_key=OPENAI_API_KEY,
        url=OPENAI_CHAT_URL,
        max_tokens=OPENAI_CHAT_MAX_TOKENS,
    )

    app.include_router(health_router)
    app.include_router(gemini_router)
    app.include_router(openai_router)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.add_middleware(
        RealtimeAcceptor,
        handler=functools.partial(
            handle_realtime_connection,
            settings=settings,
            connector=connector,
            registry=registry,
        ),
        prefix=settings.path_prefix,
    )

    @app.on_event("startup")
    async def announce() -> None:
        """Log where the relay listens and what it forwards to."""
        logger.info("WS endpoint prefix: %s", settings.path_prefix)
        logger.info("Upstream OPENAI_REALTIME_URL: %s", settings.upstream_url)
        logger.info("OpenAI key: %s", safe_key_suffix(settings.api_key))
        gemini_client: GeminiClient = app.state.gemini
        logger.info(
            "Gemini HTTP enabled: %s",
            f"YES key={safe_key_suffix(gemini_client.api_key)}" if gemini_client.enabled else "NO (missing GEMINI_API_KEY)",
        )
        logger.info("Gemini base: %s", gemini_client.api_base)

    @app.on_event("shutdown")
    async def shutdown() -> None:
        """Terminate live pairs and release the shared HTTP client."""
        registry.terminate_all("shutdown")
        if http_client is not None:
            await http_client.aclose()

    return app


app = create_app()
