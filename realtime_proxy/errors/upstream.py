"""Upstream connector failures.

Every outcome of a connect attempt other than an open session maps to one
of these exceptions. Each carries the close reason the client leg receives,
so the pair can tear down without inspecting the failure further.
"""


class UpstreamConnectError(Exception):
    """Base class for fatal connect outcomes.

    Attributes:
        reason: Close reason forwarded to the client leg.
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or reason)
        self.reason = reason


class MissingCredentialError(UpstreamConnectError):
    """Raised before any connect attempt when no bearer key is configured."""

    def __init__(self, name: str = "OPENAI_API_KEY") -> None:
        super().__init__(f"missing {name}")
        self.name = name


class HandshakeRejectedError(UpstreamConnectError):
    """Raised when upstream answers the upgrade with a plain HTTP response.

    Attributes:
        status: HTTP status code of the rejection (e.g. 401).
    """

    def __init__(self, status: int) -> None:
        super().__init__(
            f"openai unexpected-response {status}",
            f"upstream rejected handshake with HTTP {status}",
        )
        self.status = status


class UpstreamTransportError(UpstreamConnectError):
    """Raised on DNS, TLS, reset or timeout failures while connecting."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__("openai error", message)


__all__ = [
    "UpstreamConnectError",
    "MissingCredentialError",
    "HandshakeRejectedError",
    "UpstreamTransportError",
]
