"""Run the proxy with uvicorn: ``python -m realtime_proxy``."""

from __future__ import annotations

import logging

import uvicorn

from .logging import configure_logging
from .config import HOST, PORT, REALTIME_PATH_PREFIX, WS_KEEPALIVE_INTERVAL_S, WS_MAX_FRAME_BYTES

logger = logging.getLogger("realtime_proxy")


def main() -> None:
    configure_logging()
    logger.info("Listening on %s:%s", HOST, PORT)
    logger.info("WS endpoint: ws://localhost:%s%s", PORT, REALTIME_PATH_PREFIX)
    uvicorn.run(
        "realtime_proxy.server:app",
        host=HOST,
        port=PORT,
        # Client-leg liveness probes; ASGI apps cannot ping on their own
        ws_ping_interval=WS_KEEPALIVE_INTERVAL_S,
        ws_max_size=WS_MAX_FRAME_BYTES,
        log_config=None,
    )


if __name__ == "__main__":
    main()
