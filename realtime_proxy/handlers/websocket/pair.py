"""Connection pair: one client leg coupled to one upstream leg.

``ConnectionPair.run()`` drives a pair from acceptance to teardown:

1. The client→upstream pump starts at once. Frames the client sends while
   the upstream leg is still connecting are dropped like any other send to
   a leg that is not open.
2. The connector opens the upstream leg. A fatal outcome force-terminates
   the upstream side and triggers teardown with 1011.
3. On success the upstream→client pump and the keepalive driver start.
4. run() returns once the coordinator reaches CLOSED; every task the pair
   spawned is cancelled on the way out, whatever the exit path.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import uuid
from collections.abc import Coroutine
from typing import Any

from ...config.websocket import WS_CLOSE_INTERNAL_ERROR_CODE
from ...errors import UpstreamConnectError, classify_error
from .connector import UpstreamConnector
from .keepalive import KeepaliveDriver
from .legs import Leg, UpstreamLeg
from .lifecycle import LifecycleCoordinator, PairState
from .relay import FlowStats, relay_frames
from .settings import RelaySettings

logger = logging.getLogger(__name__)


class ConnectionPair:
    """Coupled client and upstream legs plus their shared teardown state.

    Attributes:
        pair_id: Short id used in logs.
        client: Inbound leg (already accepted).
        upstream: Outbound leg, CONNECTING until the connector succeeds.
        coordinator: Teardown state machine shared by both legs.
        keepalive: Probe driver, active only while the pair is ACTIVE.
        to_upstream: Counters for the client→upstream direction.
        to_client: Counters for the upstream→client direction.
    """

    def __init__(
        self,
        client: Leg,
        settings: RelaySettings,
        *,
        connector: UpstreamConnector | None = None,
        pair_id: str | None = None,
    ) -> None:
        self.pair_id = pair_id or uuid.uuid4().hex[:12]
        self.settings = settings
        self.client = client
        self.upstream = UpstreamLeg()
        self._connector = connector or UpstreamConnector()
        legs = (self.client, self.upstream)
        self.keepalive = KeepaliveDriver(legs, settings.keepalive_interval_s)
        self.coordinator = LifecycleCoordinator(legs, grace_period_s=settings.close_grace_s)
        self.coordinator.add_closing_callback(self.keepalive.cancel)
        self.coordinator.add_closing_callback(self._cancel_connect)
        self.to_upstream = FlowStats()
        self.to_client = FlowStats()
        self._connect_task: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> PairState:
        return self.coordinator.state

    async def run(self) -> None:
        """Relay until both legs are closed (or terminated)."""
        try:
            self._spawn(relay_frames(self.client, self.upstream, self.coordinator, self.to_upstream))
            self._connect_task = self._spawn(self._open_upstream())
            await self.coordinator.wait_closed()
        finally:
            # Covers cancellation of run() itself: no leg outlives the pair
            self.coordinator.terminate("pair released")
            await self._release()

    def terminate(self, reason: str = "shutdown") -> None:
        """Force-terminate both legs immediately."""
        logger.info("terminating pair reason=%s", reason)
        self.coordinator.terminate(reason)

    async def _open_upstream(self) -> None:
        try:
            connection = await self._connector.connect(self.settings)
        except UpstreamConnectError as exc:
            logger.error(
                "upstream unavailable (%s): %s",
                classify_error(exc),
                exc,
            )
            # Never reached a usable session: terminate, never close gracefully
            self.upstream.terminate()
            self.coordinator.trigger(WS_CLOSE_INTERNAL_ERROR_CODE, exc.reason)
            return
        except Exception:
            logger.exception("upstream connect crashed")
            self.upstream.terminate()
            self.coordinator.trigger(WS_CLOSE_INTERNAL_ERROR_CODE, f"{self.upstream.name} error")
            return

        self.upstream.attach(connection)
        if self.coordinator.state is not PairState.ACTIVE:
            # Teardown began in the same tick the handshake completed
            self.upstream.terminate()
            return

        logger.info("upstream connected")
        self._spawn(relay_frames(self.upstream, self.client, self.coordinator, self.to_client))
        self.keepalive.start()

    def _cancel_connect(self) -> None:
        task = self._connect_task
        if task is None or task.done() or task is asyncio.current_task():
            return
        task.cancel()

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _release(self) -> None:
        await self.keepalive.stop()
        current = asyncio.current_task()
        tasks = [task for task in self._tasks if task is not current]
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task
        logger.info(
            "pair released code=%s reason=%s forced=%s to_upstream=%s to_client=%s probes=%s",
            self.coordinator.close_code,
            self.coordinator.close_reason,
            self.coordinator.forced,
            self.to_upstream.as_dict(),
            self.to_client.as_dict(),
            self.keepalive.probes_sent,
        )


__all__ = ["ConnectionPair"]
