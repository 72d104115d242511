"""Upstream realtime endpoint configuration.

OPENAI_REALTIME_URL:
    WebSocket URL of the realtime speech API. Empty values fall back to the
    default model endpoint.

OPENAI_BETA_HEADER:
    Value of the ``OpenAI-Beta`` header identifying the protocol revision
    the relayed clients speak.
"""

import os


DEFAULT_OPENAI_REALTIME_URL = "wss://api.openai.com/v1/realtime?model=gpt-realtime"

OPENAI_REALTIME_URL = (
    (os.getenv("OPENAI_REALTIME_URL", "") or "").strip() or DEFAULT_OPENAI_REALTIME_URL
)
OPENAI_BETA_HEADER = (os.getenv("OPENAI_BETA_HEADER", "") or "").strip() or "realtime=v1"


__all__ = [
    "DEFAULT_OPENAI_REALTIME_URL",
    "OPENAI_REALTIME_URL",
    "OPENAI_BETA_HEADER",
]
