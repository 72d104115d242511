"""HTTP surface configuration (request bodies and CORS)."""

import os


HTTP_MAX_BODY_BYTES = int(os.getenv("HTTP_MAX_BODY_BYTES", str(256 * 1024)))

CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["content-type", "x-request-id"]


__all__ = [
    "HTTP_MAX_BODY_BYTES",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_HEADERS",
]
