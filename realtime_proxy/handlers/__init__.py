"""Connection and request handlers.

This package provides the relay's inbound surfaces:

connections.py:
    Registry of active connection pairs; force-terminates them on shutdown.

websocket/:
    Realtime relay core:
    - Upgrade routing by path prefix (acceptor.py)
    - Client and upstream leg adapters (legs.py)
    - Upstream connect outcomes (connector.py)
    - Per-direction frame pumps (relay.py)
    - Teardown state machine with grace period (lifecycle.py)
    - Periodic liveness probes (keepalive.py)
    - Pair orchestration and entry point (pair.py, manager.py)

http/:
    Health check and provider-facing JSON handlers:
    - Body reading with size cap (body.py)
    - Response envelopes and exception handlers (responses.py, errors.py)
    - Gemini and OpenAI chat routes (gemini.py, openai.py)
"""
