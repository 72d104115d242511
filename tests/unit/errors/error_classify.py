"""Unit tests for exception classification labels."""

from __future__ import annotations

from realtime_proxy.errors import (
    HandshakeRejectedError,
    MissingCredentialError,
    PayloadTooLargeError,
    ProviderError,
    UpstreamTransportError,
    ValidationError,
    classify_error,
)


def test_classify_error_known_categories() -> None:
    assert classify_error(MissingCredentialError()) == "missing_credential"
    assert classify_error(HandshakeRejectedError(403)) == "handshake_rejected"
    assert classify_error(UpstreamTransportError("reset")) == "upstream_transport"
    assert classify_error(ValidationError("invalid_json", "invalid json")) == "validation"
    assert classify_error(PayloadTooLargeError(1024)) == "validation"
    assert classify_error(ProviderError("Gemini HTTP 500", status_code=502)) == "provider"
    assert classify_error(TimeoutError("deadline exceeded")) == "timeout"
    assert classify_error(ConnectionError("socket closed")) == "connection"


def test_classify_error_defaults_to_unknown() -> None:
    assert classify_error(RuntimeError("boom")) == "unknown"


def test_upstream_errors_carry_client_close_reasons() -> None:
    assert MissingCredentialError().reason == "missing OPENAI_API_KEY"
    assert HandshakeRejectedError(401).reason == "openai unexpected-response 401"
    assert UpstreamTransportError("tls handshake failed").reason == "openai error"
    assert str(UpstreamTransportError("tls handshake failed")) == "tls handshake failed"


def test_payload_too_large_maps_to_413() -> None:
    exc = PayloadTooLargeError(256 * 1024)
    assert exc.status_code == 413
    assert exc.limit == 256 * 1024
