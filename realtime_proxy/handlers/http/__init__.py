"""HTTP route exports."""

from .errors import register_exception_handlers
from .gemini import router as gemini_router
from .health import router as health_router
from .openai import router as openai_router

__all__ = [
    "register_exception_handlers",
    "gemini_router",
    "health_router",
    "openai_router",
]
