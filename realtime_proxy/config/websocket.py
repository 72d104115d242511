"""WebSocket relay runtime configuration values.

Timers:
    WS_KEEPALIVE_INTERVAL_S: Period of the liveness probe sent on each open
        leg of an active pair. Keeps idle-timeout proxies from cutting the
        connection during silent stretches of a voice session.

    WS_CLOSE_GRACE_S: Bounded wait after a teardown starts. Legs that have
        not finished their close handshake by then are terminated.

    WS_UPSTREAM_OPEN_TIMEOUT_S: Max time the upstream handshake may take
        before it counts as a transport error.

Close Codes (RFC 6455):
    1000: Normal closure (either peer closed cleanly)
    1011: Internal error (upstream rejection, transport errors, missing key)

Routing:
    REALTIME_PATH_PREFIX: Upgrade requests whose path does not start with
        this prefix are denied before the handshake.
"""

from __future__ import annotations

import os

# ============================================================================
# Timer Configuration
# ============================================================================

WS_KEEPALIVE_INTERVAL_S = float(os.getenv("WS_KEEPALIVE_INTERVAL_S", "20"))
WS_CLOSE_GRACE_S = float(os.getenv("WS_CLOSE_GRACE_S", "1.5"))
WS_UPSTREAM_OPEN_TIMEOUT_S = float(os.getenv("WS_UPSTREAM_OPEN_TIMEOUT_S", "10"))

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_INTERNAL_ERROR_CODE = 1011
WS_CLOSE_ABNORMAL_CODE = 1006  # Never sent; reported by servers on abrupt loss

# ============================================================================
# Routing and frame limits
# ============================================================================

REALTIME_PATH_PREFIX = os.getenv("REALTIME_PATH_PREFIX", "/realtime")
WS_MAX_FRAME_BYTES = int(os.getenv("WS_MAX_FRAME_BYTES", str(16 * 1024 * 1024)))

__all__ = [
    "WS_KEEPALIVE_INTERVAL_S",
    "WS_CLOSE_GRACE_S",
    "WS_UPSTREAM_OPEN_TIMEOUT_S",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_ABNORMAL_CODE",
    "REALTIME_PATH_PREFIX",
    "WS_MAX_FRAME_BYTES",
]
