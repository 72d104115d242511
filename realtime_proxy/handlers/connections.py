"""Registry of active connection pairs.

The registry is the only process-wide mutable state in the relay. The
acceptor adds a pair the moment it is created and the pair's handler
removes it once teardown completes. On process shutdown every pair still
registered is force-terminated, so no upstream connection outlives its
client (or the other way around).

Example:
    registry = PairRegistry()

    async def handle(ws):
        pair = ConnectionPair(ClientLeg(ws), settings)
        registry.add(pair)
        try:
            await pair.run()
        finally:
            registry.discard(pair)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .websocket.pair import ConnectionPair

logger = logging.getLogger(__name__)


class PairRegistry:
    """Tracks live pairs for observability and shutdown.

    Attributes:
        active_pairs: Set of pairs that have not finished teardown.
    """

    def __init__(self) -> None:
        self.active_pairs: set[ConnectionPair] = set()

    def add(self, pair: ConnectionPair) -> None:
        self.active_pairs.add(pair)
        logger.info("Pair registered: %s active", len(self.active_pairs))

    def discard(self, pair: ConnectionPair) -> None:
        if pair in self.active_pairs:
            self.active_pairs.remove(pair)
            logger.info("Pair removed: %s active", len(self.active_pairs))

    def get_pair_count(self) -> int:
        return len(self.active_pairs)

    def terminate_all(self, reason: str = "shutdown") -> int:
        """Force-terminate every registered pair; return how many there were."""
        pairs = list(self.active_pairs)
        for pair in pairs:
            pair.terminate(reason)
        if pairs:
            logger.info("Terminated %s pair(s) reason=%s", len(pairs), reason)
        return len(pairs)


# Global registry instance
pairs = PairRegistry()
