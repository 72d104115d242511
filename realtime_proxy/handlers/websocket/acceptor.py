"""Connection acceptor: the ASGI boundary for WebSocket upgrades.

Every WebSocket scope passes through ``RealtimeAcceptor`` before it reaches
the router. Paths under the reserved prefix go to the relay handler; every
other upgrade is denied before the handshake (the ASGI server answers the
upgrade request with HTTP 403, so no WebSocket session or close frame ever
exists). HTTP scopes pass through untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocket

logger = logging.getLogger(__name__)

RealtimeHandler = Callable[[WebSocket], Awaitable[None]]


def is_realtime_path(path: str, prefix: str) -> bool:
    """Return True if ``path`` falls under the reserved relay prefix."""
    return bool(prefix) and path.startswith(prefix)


async def deny_upgrade(send: Send) -> None:
    """Refuse a WebSocket upgrade without completing the handshake.

    Closing before accept makes the ASGI server answer the upgrade request
    with an HTTP 403 response; the client sees a failed handshake.
    """
    await send({"type": "websocket.close", "code": 1000, "reason": ""})


class RealtimeAcceptor:
    """ASGI middleware routing upgrade requests by path prefix."""

    def __init__(self, app: ASGIApp, *, handler: RealtimeHandler, prefix: str) -> None:
        self.app = app
        self.handler = handler
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "websocket":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        if not is_realtime_path(path, self.prefix):
            logger.debug("rejecting upgrade for path=%s", path)
            await deny_upgrade(send)
            return

        await self.handler(WebSocket(scope, receive=receive, send=send))


__all__ = ["RealtimeAcceptor", "RealtimeHandler", "deny_upgrade", "is_realtime_path"]
