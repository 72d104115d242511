"""Exception classification helpers for log labels."""

from __future__ import annotations

from .provider import ProviderError
from .validation import ValidationError
from .upstream import (
    HandshakeRejectedError,
    MissingCredentialError,
    UpstreamTransportError,
)

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (MissingCredentialError, "missing_credential"),
    (HandshakeRejectedError, "handshake_rejected"),
    (UpstreamTransportError, "upstream_transport"),
    (ValidationError, "validation"),
    (ProviderError, "provider"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
