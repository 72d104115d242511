"""Upstream connector: opens the outbound leg of a pair.

One call makes at most one connection attempt. Every outcome other than an
open session is raised as an ``UpstreamConnectError`` subclass carrying the
close reason the client will see:

    MissingCredentialError   no key configured; nothing was attempted
    HandshakeRejectedError   upstream answered the upgrade with plain HTTP
    UpstreamTransportError   DNS, TLS, reset, timeout, protocol failure, or
                             any other error raised while connecting

No retries happen here. A failed pair is terminal and the client reconnects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import InvalidStatus, WebSocketException

from ...errors import (
    HandshakeRejectedError,
    MissingCredentialError,
    UpstreamTransportError,
)
from ...helpers.redact import safe_key_suffix
from .settings import RelaySettings

logger = logging.getLogger(__name__)

# Signature-compatible with websockets.asyncio.client.connect
ConnectFactory = Callable[..., Any]


class UpstreamConnector:
    """Establishes authenticated connections to the realtime endpoint."""

    def __init__(self, connect_factory: ConnectFactory = connect) -> None:
        self._connect = connect_factory

    async def connect(self, settings: RelaySettings) -> ClientConnection:
        """Open one upstream connection using ``settings``.

        Raises:
            MissingCredentialError: ``settings.api_key`` is empty.
            HandshakeRejectedError: Upstream refused the upgrade.
            UpstreamTransportError: The connection could not be established.
        """
        if not settings.api_key:
            raise MissingCredentialError("OPENAI_API_KEY")

        logger.info(
            "connecting upstream url=%s key=%s",
            settings.upstream_url,
            safe_key_suffix(settings.api_key),
        )
        try:
            return await self._connect(
                settings.upstream_url,
                additional_headers=settings.upstream_headers(),
                open_timeout=settings.open_timeout_s,
                # Probes are driven per pair by KeepaliveDriver
                ping_interval=None,
                max_size=settings.max_frame_bytes,
            )
        except InvalidStatus as exc:
            status = exc.response.status_code
            logger.error("upstream rejected handshake status=%s", status)
            raise HandshakeRejectedError(status) from exc
        except (OSError, TimeoutError, WebSocketException) as exc:
            logger.error("upstream connect failed: %s", exc)
            raise UpstreamTransportError(str(exc) or type(exc).__name__) from exc
        except Exception as exc:
            # Malformed URLs and other local failures surface as ValueError and friends
            logger.error("upstream connect failed (%s): %s", type(exc).__name__, exc)
            raise UpstreamTransportError(str(exc) or type(exc).__name__) from exc


__all__ = ["ConnectFactory", "UpstreamConnector"]
