"""Centralized exception classes for the relay.

This module re-exports all domain-specific exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - upstream.py: Upstream connect outcomes (missing key, rejection, transport)
    - provider.py: Text-generation provider failures
    - validation.py: Request body validation errors with status codes
    - classify.py: Exception-to-label mapping for logs
"""

from .classify import classify_error
from .provider import ProviderError
from .validation import PayloadTooLargeError, ValidationError
from .upstream import (
    HandshakeRejectedError,
    MissingCredentialError,
    UpstreamConnectError,
    UpstreamTransportError,
)

__all__ = [
    # Upstream connector
    "UpstreamConnectError",
    "MissingCredentialError",
    "HandshakeRejectedError",
    "UpstreamTransportError",
    # Providers
    "ProviderError",
    # Validation
    "ValidationError",
    "PayloadTooLargeError",
    # Classification
    "classify_error",
]
