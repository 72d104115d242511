"""Startup configuration checks."""

from __future__ import annotations

import logging

from realtime_proxy.config.secrets import GEMINI_API_KEY, OPENAI_API_KEY
from realtime_proxy.config.websocket import (
    REALTIME_PATH_PREFIX,
    WS_CLOSE_GRACE_S,
    WS_KEEPALIVE_INTERVAL_S,
)

logger = logging.getLogger(__name__)


def validate_env() -> list[str]:
    """Validate configuration once during startup.

    Hard misconfiguration (non-positive timers, a prefix that is not an
    absolute path) raises. Missing provider keys only degrade the affected
    routes, so they are returned as warnings and logged.
    """
    errors: list[str] = []
    if WS_KEEPALIVE_INTERVAL_S <= 0:
        errors.append("WS_KEEPALIVE_INTERVAL_S must be positive")
    if WS_CLOSE_GRACE_S <= 0:
        errors.append("WS_CLOSE_GRACE_S must be positive")
    if not REALTIME_PATH_PREFIX.startswith("/"):
        errors.append(f"REALTIME_PATH_PREFIX must start with '/', got: {REALTIME_PATH_PREFIX}")
    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

    warnings: list[str] = []
    if not OPENAI_API_KEY:
        warnings.append("OPENAI_API_KEY is not set; realtime connections will be refused")
    if not GEMINI_API_KEY:
        warnings.append("GEMINI_API_KEY is not set; /gemini/* routes will fail")
    for warning in warnings:
        logger.warning(warning)
    return warnings


__all__ = ["validate_env"]
