"""Exception handlers rendering failures as ``{"ok": false}`` envelopes.

Known failures (``ProviderError``, ``ValidationError``) go through FastAPI
exception handlers. Anything else is caught by an HTTP middleware that sits
inside ``CORSMiddleware``, so unexpected 500s still carry CORS headers and
never reach Starlette's server-error middleware.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from ...errors import ProviderError, ValidationError, classify_error
from .responses import json_error

logger = logging.getLogger(__name__)


async def _provider_error_handler(request: Request, exc: ProviderError) -> ORJSONResponse:
    logger.error("%s error: %s", request.url.path, exc.message)
    return json_error(
        exc.status_code,
        exc.message,
        upstream_status=exc.upstream_status,
        upstream_body=exc.upstream_body,
    )


async def _validation_error_handler(request: Request, exc: ValidationError) -> ORJSONResponse:
    logger.warning("%s rejected (%s): %s", request.url.path, exc.error_code, exc.message)
    return json_error(exc.status_code, exc.message)


async def _unhandled_error_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("%s failed (%s)", request.url.path, classify_error(exc))
        return json_error(500, str(exc) or "error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install error rendering; call before adding ``CORSMiddleware``."""
    app.add_exception_handler(ProviderError, _provider_error_handler)
    app.add_exception_handler(ValidationError, _validation_error_handler)
    app.middleware("http")(_unhandled_error_middleware)


__all__ = ["register_exception_handlers"]
