"""Text-generation provider exceptions."""

from __future__ import annotations


class ProviderError(Exception):
    """Failure while calling a text-generation provider.

    Attributes:
        status_code: HTTP status returned to our caller.
        upstream_status: Status the provider answered with, when it answered.
        upstream_body: Provider response body (truncated), when available.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        upstream_status: int | None = None,
        upstream_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


__all__ = ["ProviderError"]
