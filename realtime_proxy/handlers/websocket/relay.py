"""Frame relay pumps.

One pump runs per direction. A pump awaits each send before reading the
next frame, which is what preserves per-direction order; the two
directions are independent tasks with no ordering between them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...config.websocket import WS_CLOSE_INTERNAL_ERROR_CODE, WS_CLOSE_NORMAL_CODE
from .disconnects import is_expected_disconnect
from .legs import Leg
from .lifecycle import LifecycleCoordinator

logger = logging.getLogger(__name__)


@dataclass
class FlowStats:
    """Per-direction counters, logged when the pair closes."""

    relayed: int = 0
    dropped: int = 0
    bytes_relayed: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "relayed": self.relayed,
            "dropped": self.dropped,
            "bytes": self.bytes_relayed,
        }


async def relay_frames(
    source: Leg,
    destination: Leg,
    coordinator: LifecycleCoordinator,
    stats: FlowStats | None = None,
) -> None:
    """Forward frames from ``source`` to ``destination`` until source ends.

    A clean end of ``source`` triggers teardown with 1000; an error on
    either side triggers it with 1011. Frames offered while ``destination``
    is not open are dropped and counted.
    """
    stats = stats if stats is not None else FlowStats()
    try:
        async for frame in source.frames():
            try:
                sent = await destination.send(frame)
            except Exception:
                logger.warning("%s leg send failed", destination.name, exc_info=True)
                coordinator.trigger(WS_CLOSE_INTERNAL_ERROR_CODE, f"{destination.name} error")
                return
            if sent:
                stats.relayed += 1
                stats.bytes_relayed += frame.size
            else:
                stats.dropped += 1
    except Exception as exc:
        if is_expected_disconnect(exc):
            logger.info("%s leg lost: %s", source.name, exc)
        else:
            logger.warning("%s leg error", source.name, exc_info=True)
        coordinator.trigger(WS_CLOSE_INTERNAL_ERROR_CODE, f"{source.name} error")
        return

    logger.info(
        "%s leg closed code=%s reason=%s",
        source.name,
        source.close_code,
        source.close_reason,
    )
    coordinator.trigger(WS_CLOSE_NORMAL_CODE, f"{source.name} closed")


__all__ = ["FlowStats", "relay_frames"]
