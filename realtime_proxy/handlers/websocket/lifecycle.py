"""Per-pair teardown state machine.

Close and error events can arrive from either leg, in either order, or in
the same loop iteration. The coordinator collapses all of them into one
teardown:

    ACTIVE ──trigger()──▶ CLOSING ──both legs closed / grace expired──▶ CLOSED

1. trigger() is synchronous and guarded by the state check, so a second
   trigger (even from the same tick) only observes CLOSING and returns.
2. Entering CLOSING runs the closing callbacks (keepalive cancellation,
   pending connect cancellation) before any close is issued.
3. Every leg not already closed gets one graceful close with the trigger's
   code and reason. Legs still open when the grace period elapses are
   terminated.
4. terminate() skips the graceful phase entirely; it is used on process
   shutdown.

Usage:
    coordinator = LifecycleCoordinator((client, upstream), grace_period_s=1.5)
    coordinator.add_closing_callback(keepalive.cancel)
    ...
    coordinator.trigger(1000, "client closed")
    await coordinator.wait_closed()
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Sequence
from enum import Enum

from .legs import Leg

logger = logging.getLogger(__name__)


class PairState(str, Enum):
    ACTIVE = "active"
    CLOSING = "closing"
    CLOSED = "closed"


class LifecycleCoordinator:
    """Owns the close/terminate protocol for one connection pair.

    Attributes:
        state: Current ``PairState``.
        close_code: Code of the trigger that started teardown.
        close_reason: Reason of the trigger that started teardown.
        forced: True when at least one leg had to be terminated.
    """

    def __init__(self, legs: Sequence[Leg], *, grace_period_s: float) -> None:
        self._legs = tuple(legs)
        self._grace_period_s = float(grace_period_s)
        self._closing_callbacks: list[Callable[[], None]] = []
        self._closed = asyncio.Event()
        self._teardown_task: asyncio.Task | None = None
        self.state = PairState.ACTIVE
        self.close_code: int | None = None
        self.close_reason: str = ""
        self.forced = False

    def add_closing_callback(self, callback: Callable[[], None]) -> None:
        """Register a callback run once, on entering CLOSING."""
        self._closing_callbacks.append(callback)

    def trigger(self, code: int, reason: str) -> bool:
        """Start teardown; return False if it had already started."""
        if self.state is not PairState.ACTIVE:
            logger.debug("teardown already %s; ignoring trigger %s", self.state.value, reason)
            return False
        self._enter_closing(code, reason)
        logger.info("pair closing code=%s reason=%s", code, reason)
        self._teardown_task = asyncio.create_task(self._teardown(code, reason))
        return True

    def terminate(self, reason: str = "shutdown") -> None:
        """Terminate every leg now, without a close handshake."""
        if self.state is PairState.CLOSED:
            return
        if self.state is PairState.ACTIVE:
            self._enter_closing(None, reason)
        task = self._teardown_task
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()
        self._terminate_open_legs()
        self._finish()

    async def wait_closed(self) -> None:
        await self._closed.wait()

    @property
    def is_closed(self) -> bool:
        return self.state is PairState.CLOSED

    def _enter_closing(self, code: int | None, reason: str) -> None:
        self.state = PairState.CLOSING
        self.close_code = code
        self.close_reason = reason
        for callback in self._closing_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("closing callback failed")

    async def _teardown(self, code: int, reason: str) -> None:
        pending = [leg for leg in self._legs if not leg.is_closed]
        if pending:
            closes = asyncio.gather(
                *(leg.close(code, reason) for leg in pending),
                return_exceptions=True,
            )
            try:
                await asyncio.wait_for(closes, timeout=self._grace_period_s)
            except asyncio.TimeoutError:
                stragglers = [leg.name for leg in self._legs if not leg.is_closed]
                logger.info(
                    "close grace period %.2fs elapsed; terminating %s",
                    self._grace_period_s,
                    ",".join(stragglers) or "-",
                )
        self._terminate_open_legs()
        self._finish()

    def _terminate_open_legs(self) -> None:
        for leg in self._legs:
            if leg.is_closed:
                continue
            self.forced = True
            with contextlib.suppress(Exception):
                leg.terminate()

    def _finish(self) -> None:
        self.state = PairState.CLOSED
        self._closed.set()


__all__ = ["PairState", "LifecycleCoordinator"]
