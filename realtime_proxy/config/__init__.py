"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- server: listen address
- secrets: provider API keys
- upstream: realtime endpoint and protocol header
- websocket: relay timers, close codes and routing prefix
- providers: text-generation provider endpoints and defaults
- http: request body limits and CORS
- logging: log level and format

Functions live in realtime_proxy/helpers/.
"""

from .server import HOST, PORT
from .secrets import OPENAI_API_KEY, GEMINI_API_KEY
from .upstream import (
    DEFAULT_OPENAI_REALTIME_URL,
    OPENAI_REALTIME_URL,
    OPENAI_BETA_HEADER,
)
from .websocket import (
    WS_KEEPALIVE_INTERVAL_S,
    WS_CLOSE_GRACE_S,
    WS_UPSTREAM_OPEN_TIMEOUT_S,
    WS_CLOSE_NORMAL_CODE,
    WS_CLOSE_INTERNAL_ERROR_CODE,
    WS_CLOSE_ABNORMAL_CODE,
    REALTIME_PATH_PREFIX,
    WS_MAX_FRAME_BYTES,
)
from .providers import (
    GEMINI_API_VERSION,
    GEMINI_API_BASE,
    GEMINI_DEFAULT_MODEL,
    GEMINI_DEFAULT_MAX_OUTPUT_TOKENS,
    GEMINI_DEFAULT_TARGET_LANG,
    OPENAI_CHAT_URL,
    OPENAI_CHAT_DEFAULT_MODEL,
    OPENAI_CHAT_MAX_TOKENS,
    PROVIDER_ERROR_BODY_MAX_CHARS,
    PROVIDER_TIMEOUT_S,
)
from .http import (
    HTTP_MAX_BODY_BYTES,
    CORS_ALLOW_ORIGINS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_HEADERS,
)

__all__ = [
    # server
    "HOST",
    "PORT",
    # secrets
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    # upstream
    "DEFAULT_OPENAI_REALTIME_URL",
    "OPENAI_REALTIME_URL",
    "OPENAI_BETA_HEADER",
    # websocket
    "WS_KEEPALIVE_INTERVAL_S",
    "WS_CLOSE_GRACE_S",
    "WS_UPSTREAM_OPEN_TIMEOUT_S",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_ABNORMAL_CODE",
    "REALTIME_PATH_PREFIX",
    "WS_MAX_FRAME_BYTES",
    # providers
    "GEMINI_API_VERSION",
    "GEMINI_API_BASE",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_MAX_OUTPUT_TOKENS",
    "GEMINI_DEFAULT_TARGET_LANG",
    "OPENAI_CHAT_URL",
    "OPENAI_CHAT_DEFAULT_MODEL",
    "OPENAI_CHAT_MAX_TOKENS",
    "PROVIDER_ERROR_BODY_MAX_CHARS",
    "PROVIDER_TIMEOUT_S",
    # http
    "HTTP_MAX_BODY_BYTES",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_HEADERS",
]
