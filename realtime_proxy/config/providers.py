"""Text-generation provider endpoints and defaults."""

import os


GEMINI_API_VERSION = (os.getenv("GEMINI_API_VERSION", "v1beta") or "v1beta").strip()
GEMINI_API_BASE = f"https://generativelanguage.googleapis.com/{GEMINI_API_VERSION}"
GEMINI_DEFAULT_MODEL = os.getenv("GEMINI_DEFAULT_MODEL", "gemini-2.5-flash-lite")
GEMINI_DEFAULT_MAX_OUTPUT_TOKENS = int(os.getenv("GEMINI_DEFAULT_MAX_OUTPUT_TOKENS", "256"))
GEMINI_DEFAULT_TARGET_LANG = os.getenv("GEMINI_DEFAULT_TARGET_LANG", "zh-TW")

OPENAI_CHAT_URL = os.getenv("OPENAI_CHAT_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_CHAT_DEFAULT_MODEL = os.getenv("OPENAI_CHAT_DEFAULT_MODEL", "gpt-4o-mini")
OPENAI_CHAT_MAX_TOKENS = int(os.getenv("OPENAI_CHAT_MAX_TOKENS", "1024"))

# Upstream error bodies are echoed back to callers truncated to this size
PROVIDER_ERROR_BODY_MAX_CHARS = int(os.getenv("PROVIDER_ERROR_BODY_MAX_CHARS", "2000"))
PROVIDER_TIMEOUT_S = float(os.getenv("PROVIDER_TIMEOUT_S", "60"))


__all__ = [
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
]
