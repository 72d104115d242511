"""Unit tests for secret redaction in logs."""

from __future__ import annotations

from realtime_proxy.handlers.websocket.settings import RelaySettings
from realtime_proxy.helpers.redact import safe_key_suffix


def test_safe_key_suffix_shows_last_four_only() -> None:
    assert safe_key_suffix("sk-proj-abcdefgh1234") == "****1234"


def test_safe_key_suffix_missing_key() -> None:
    assert safe_key_suffix("") == "(missing)"
    assert safe_key_suffix(None) == "(missing)"


def test_settings_repr_hides_api_key() -> None:
    settings = RelaySettings(upstream_url="wss://upstream.test", api_key="sk-secret-value")
    assert "sk-secret-value" not in repr(settings)
