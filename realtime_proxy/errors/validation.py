"""Input validation exceptions with structured error codes.

Raised by the HTTP handlers when a request body cannot be used. Each
exception carries the HTTP status to answer with alongside a machine
readable code.
"""


class ValidationError(Exception):
    """Structured validation failure with error code metadata.

    Attributes:
        error_code: Machine-parseable error identifier.
        message: Human-readable error description.
        status_code: HTTP status for the response.
    """

    def __init__(self, error_code: str, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.status_code = status_code


class PayloadTooLargeError(ValidationError):
    """Raised when a request body exceeds the configured size cap."""

    def __init__(self, limit: int) -> None:
        super().__init__("payload_too_large", "payload too large", status_code=413)
        self.limit = limit


__all__ = ["ValidationError", "PayloadTooLargeError"]
