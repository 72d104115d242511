"""Per-pair keepalive probing.

Each active pair gets a KeepaliveDriver that:

1. Sleeps for the keepalive interval
2. Sends a liveness probe on every leg that is currently OPEN
3. Repeats until cancelled

Idle voice sessions can go quiet for long stretches; without probes,
load balancers and NAT boxes between the client, the relay and upstream
drop the connection. The driver is cancelled the moment the pair starts
closing, so a leg in CLOSING never receives a probe.

In practice only the upstream leg is probed here. ``ClientLeg.ping()``
returns False because ASGI has no ping event; client-side probes come from
uvicorn's process-wide ``ws_ping_interval``, which is not tied to the pair
and keeps running while the pair is closing.

Usage:
    keepalive = KeepaliveDriver((client, upstream), interval_s=20)
    keepalive.start()
    ...
    keepalive.cancel()       # from the closing callback (sync)
    await keepalive.stop()   # on cleanup
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence

from .legs import Leg

logger = logging.getLogger(__name__)


class KeepaliveDriver:
    """Sends periodic probes on the open legs of one pair.

    Attributes:
        probes_sent: Number of probes that went out.
    """

    def __init__(self, legs: Sequence[Leg], interval_s: float) -> None:
        self._legs = tuple(legs)
        self._interval_s = float(interval_s)
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None
        self.probes_sent = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task | None:
        """Start the probe task (idempotent; no-op once cancelled)."""
        if self._stop_event.is_set():
            return None
        if self._task is None:
            self._task = asyncio.create_task(self._probe_loop())
        return self._task

    def cancel(self) -> None:
        """Stop probing without waiting for the task to unwind."""
        self._stop_event.set()
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def stop(self) -> None:
        """Stop the probe task and wait for it to finish."""
        self.cancel()
        if self._task is None:
            return
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await self._task
        self._task = None

    async def probe_once(self) -> int:
        """Probe every open leg once; return how many probes were sent."""
        sent = 0
        for leg in self._legs:
            if self._stop_event.is_set():
                break
            if not leg.is_open:
                continue
            try:
                if await leg.ping():
                    sent += 1
            except Exception:
                logger.debug("keepalive probe failed on %s leg", leg.name, exc_info=True)
        self.probes_sent += sent
        return sent

    async def _probe_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._interval_s)
                if self._stop_event.is_set():
                    break
                await self.probe_once()
        except asyncio.CancelledError:
            pass  # Normal shutdown path


__all__ = ["KeepaliveDriver"]
