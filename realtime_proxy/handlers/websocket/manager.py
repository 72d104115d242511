"""Relay entry point for accepted realtime connections.

Completes the handshake, builds the pair, registers it, and runs it under
a log context carrying the pair id and client address.
"""

from __future__ import annotations

import logging

from fastapi import WebSocket

from ...logging import log_context
from ..connections import PairRegistry, pairs
from .connector import UpstreamConnector
from .legs import ClientLeg
from .pair import ConnectionPair
from .settings import RelaySettings

logger = logging.getLogger(__name__)


async def handle_realtime_connection(
    ws: WebSocket,
    *,
    settings: RelaySettings,
    connector: UpstreamConnector | None = None,
    registry: PairRegistry = pairs,
) -> ConnectionPair:
    """Accept ``ws`` and relay it to upstream until the pair is closed.

    Args:
        ws: Upgrade request already matched to the reserved prefix.
        settings: Upstream parameters and relay timers.
        connector: Upstream connector (defaults to a websockets connector).
        registry: Active-pair registry.

    Returns:
        The finished pair (useful for inspection in tests).
    """
    await ws.accept()
    client = ClientLeg(ws)
    pair = ConnectionPair(client, settings, connector=connector)
    registry.add(pair)

    with log_context(pair_id=pair.pair_id, client_id=client.peer):
        logger.info("client connected path=%s peer=%s", ws.url.path, client.peer)
        try:
            await pair.run()
        finally:
            registry.discard(pair)
            logger.info(
                "client session ended code=%s reason=%s active=%s",
                pair.coordinator.close_code,
                pair.coordinator.close_reason,
                registry.get_pair_count(),
            )
    return pair


__all__ = ["handle_realtime_connection"]
