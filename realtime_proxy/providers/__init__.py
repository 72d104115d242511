"""Text-generation provider clients (Gemini, OpenAI chat)."""

from .gemini import GeminiClient, GeminiResult, extract_gemini_text
from .http import create_http_client
from .openai import OpenAIChatClient, extract_chat_text

__all__ = [
    "GeminiClient",
    "GeminiResult",
    "extract_gemini_text",
    "create_http_client",
    "OpenAIChatClient",
    "extract_chat_text",
]
