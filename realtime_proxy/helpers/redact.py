"""Helpers for keeping secrets out of log output."""

from __future__ import annotations


def safe_key_suffix(key: str | None) -> str:
    """Render an API key as its last four characters only."""
    if not key:
        return "(missing)"
    return "****" + key[-4:]


__all__ = ["safe_key_suffix"]
