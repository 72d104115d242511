"""The two connection legs of a relayed pair.

A leg wraps one WebSocket and exposes the same small surface regardless of
which library owns the socket:

    frames()     async iterator of inbound frames; ends on a clean peer
                 close, raises on transport errors
    send()       best-effort; returns False (drop) unless the leg is OPEN
    close()      graceful close with code/reason; idempotent
    terminate()  abrupt teardown without a close handshake
    ping()       liveness probe; returns False when nothing was sent

``ClientLeg`` adapts the Starlette socket accepted by the ASGI server and
``UpstreamLeg`` adapts the ``websockets`` client connection to the provider.
"""

from __future__ import annotations

import abc
import asyncio
import logging
from collections.abc import AsyncIterator
from enum import Enum

from fastapi import WebSocket
from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

from ...config.websocket import WS_CLOSE_ABNORMAL_CODE
from .disconnects import is_expected_disconnect
from .frames import Frame

logger = logging.getLogger(__name__)

# RFC 6455 caps control frame payloads at 125 bytes (2 for the code)
_MAX_CLOSE_REASON_BYTES = 123


class LegState(str, Enum):
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"


def clip_close_reason(reason: str) -> str:
    """Trim a close reason to the protocol limit without splitting UTF-8."""
    encoded = reason.encode("utf-8")
    if len(encoded) <= _MAX_CLOSE_REASON_BYTES:
        return reason
    return encoded[:_MAX_CLOSE_REASON_BYTES].decode("utf-8", errors="ignore")


class Leg(abc.ABC):
    """One side of a connection pair."""

    def __init__(self, name: str, state: LegState) -> None:
        self.name = name
        self.state = state
        self.close_code: int | None = None
        self.close_reason: str = ""

    @property
    def is_open(self) -> bool:
        return self.state is LegState.OPEN

    @property
    def is_closed(self) -> bool:
        return self.state is LegState.CLOSED

    def _mark_closed(self, code: int | None = None, reason: str = "") -> None:
        if self.close_code is None and code is not None:
            self.close_code = code
            self.close_reason = reason
        self.state = LegState.CLOSED

    @abc.abstractmethod
    def frames(self) -> AsyncIterator[Frame]:
        ...

    @abc.abstractmethod
    async def _send(self, frame: Frame) -> None:
        ...

    @abc.abstractmethod
    async def _close(self, code: int, reason: str) -> None:
        ...

    @abc.abstractmethod
    def _abort(self) -> None:
        ...

    async def send(self, frame: Frame) -> bool:
        """Send a frame if the leg is open; report whether it went out."""
        if self.state is not LegState.OPEN:
            return False
        try:
            await self._send(frame)
        except Exception as exc:
            if not is_expected_disconnect(exc):
                raise
            logger.debug("%s leg went away while sending %s bytes", self.name, frame.size)
            return False
        return True

    async def close(self, code: int, reason: str) -> None:
        """Gracefully close the leg unless it already closed or is closing."""
        if self.state in (LegState.CLOSING, LegState.CLOSED):
            return
        if self.state is LegState.CONNECTING:
            # No session exists yet, so there is nothing to close gracefully
            self.terminate()
            return
        self.state = LegState.CLOSING
        try:
            await self._close(code, clip_close_reason(reason))
        except asyncio.CancelledError:
            # Left in CLOSING so the coordinator terminates it
            raise
        except Exception as exc:
            if not is_expected_disconnect(exc):
                logger.debug("%s leg close failed", self.name, exc_info=True)
        self._mark_closed(code, reason)

    def terminate(self) -> None:
        """Drop the transport immediately; no close handshake."""
        if self.state is LegState.CLOSED:
            return
        try:
            self._abort()
        finally:
            self._mark_closed()

    async def ping(self) -> bool:
        return False


class ClientLeg(Leg):
    """Inbound leg backed by the ASGI server's WebSocket.

    ASGI has no ping event and no way to abort a socket, so the ASGI server
    owns both: uvicorn sends protocol pings on its ``ws_ping_interval`` and
    drops the transport once the endpoint coroutine returns. ``terminate()``
    only marks the leg closed so the handler can return promptly.
    """

    def __init__(self, websocket: WebSocket) -> None:
        super().__init__("client", LegState.OPEN)
        self._ws = websocket

    @property
    def peer(self) -> str:
        client = self._ws.client
        if client is None:
            return "?"
        return f"{client.host}:{client.port}"

    async def frames(self) -> AsyncIterator[Frame]:
        while True:
            message = await self._ws.receive()
            if message["type"] == "websocket.disconnect":
                code = int(message.get("code") or 1000)
                self._mark_closed(code, message.get("reason") or "")
                if code == WS_CLOSE_ABNORMAL_CODE:
                    raise ConnectionResetError("client connection lost without a close frame")
                return
            data = message.get("bytes")
            if data is not None:
                yield Frame.binary(data)
                continue
            text = message.get("text")
            if text is not None:
                yield Frame.text(text)

    async def _send(self, frame: Frame) -> None:
        if frame.is_binary:
            await self._ws.send_bytes(frame.payload)  # type: ignore[arg-type]
        else:
            await self._ws.send_text(frame.payload)  # type: ignore[arg-type]

    async def _close(self, code: int, reason: str) -> None:
        await self._ws.close(code=code, reason=reason)

    def _abort(self) -> None:
        return None


class UpstreamLeg(Leg):
    """Outbound leg backed by a ``websockets`` client connection.

    Starts CONNECTING with no connection; ``attach()`` moves it to OPEN once
    the connector succeeds.
    """

    def __init__(self, name: str = "openai") -> None:
        super().__init__(name, LegState.CONNECTING)
        self._conn: ClientConnection | None = None

    def attach(self, connection: ClientConnection) -> None:
        self._conn = connection
        self.state = LegState.OPEN

    async def frames(self) -> AsyncIterator[Frame]:
        if self._conn is None:
            return
        try:
            async for message in self._conn:
                yield Frame.from_message(message)
        except ConnectionClosed as exc:
            received = exc.rcvd
            self._mark_closed(
                received.code if received else WS_CLOSE_ABNORMAL_CODE,
                received.reason if received else "",
            )
            if not isinstance(exc, ConnectionClosedOK):
                raise
            return
        self._mark_closed(self._conn.close_code, self._conn.close_reason or "")

    async def _send(self, frame: Frame) -> None:
        await self._conn.send(frame.payload)  # type: ignore[union-attr]

    async def _close(self, code: int, reason: str) -> None:
        await self._conn.close(code=code, reason=reason)  # type: ignore[union-attr]

    def _abort(self) -> None:
        if self._conn is not None and self._conn.transport is not None:
            self._conn.transport.abort()

    async def ping(self) -> bool:
        if self._conn is None or self.state is not LegState.OPEN:
            return False
        # Pong is not awaited; a dead peer surfaces through frames()
        await self._conn.ping()
        return True


__all__ = ["LegState", "Leg", "ClientLeg", "UpstreamLeg", "clip_close_reason"]
