"""Injected configuration for the relay core.

The relay never reads process configuration directly. ``RelaySettings``
snapshots it once so tests can build pairs against fake endpoints with
shortened timers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ...config.secrets import OPENAI_API_KEY
from ...config.upstream import OPENAI_BETA_HEADER, OPENAI_REALTIME_URL
from ...config.websocket import (
    REALTIME_PATH_PREFIX,
    WS_CLOSE_GRACE_S,
    WS_KEEPALIVE_INTERVAL_S,
    WS_MAX_FRAME_BYTES,
    WS_UPSTREAM_OPEN_TIMEOUT_S,
)


@dataclass(frozen=True)
class RelaySettings:
    """Upstream connection parameters plus relay timers.

    Attributes:
        upstream_url: Realtime WebSocket endpoint.
        api_key: Bearer credential; empty means every pair is refused.
        beta_header: Value of the ``OpenAI-Beta`` protocol header.
        keepalive_interval_s: Probe period for active pairs.
        close_grace_s: Wait before closing legs are force-terminated.
        open_timeout_s: Upstream handshake timeout.
        max_frame_bytes: Largest upstream frame accepted (None = unbounded).
        path_prefix: Reserved upgrade path prefix.
    """

    upstream_url: str
    api_key: str = field(default="", repr=False)
    beta_header: str = "realtime=v1"
    keepalive_interval_s: float = 20.0
    close_grace_s: float = 1.5
    open_timeout_s: float = 10.0
    max_frame_bytes: int | None = None
    path_prefix: str = "/realtime"

    @classmethod
    def from_env(cls) -> RelaySettings:
        return cls(
            upstream_url=OPENAI_REALTIME_URL,
            api_key=OPENAI_API_KEY,
            beta_header=OPENAI_BETA_HEADER,
            keepalive_interval_s=WS_KEEPALIVE_INTERVAL_S,
            close_grace_s=WS_CLOSE_GRACE_S,
            open_timeout_s=WS_UPSTREAM_OPEN_TIMEOUT_S,
            max_frame_bytes=WS_MAX_FRAME_BYTES or None,
            path_prefix=REALTIME_PATH_PREFIX,
        )

    def with_overrides(self, **changes) -> RelaySettings:
        return replace(self, **changes)

    def upstream_headers(self) -> dict[str, str]:
        """Headers sent with the upstream upgrade request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "OpenAI-Beta": self.beta_header,
        }


__all__ = ["RelaySettings"]
