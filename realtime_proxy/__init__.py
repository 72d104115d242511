"""Realtime Proxy Package.

A small relay process that keeps provider API keys on the server. It
handles:

- WebSocket pass-through between clients and a realtime speech API
- Coupled teardown of both legs with a bounded grace period
- Keepalive probes for long, quiet voice sessions
- JSON forwarding routes for Gemini and OpenAI chat
- A plain-text health check

Architecture Overview:
    - server.py: FastAPI application entry point
    - config/: Configuration modules (environment-based)
    - handlers/websocket/: Relay core (acceptor, legs, connector, relay,
      lifecycle coordinator, keepalive, pair)
    - handlers/http/: Health and provider routes
    - providers/: Gemini and OpenAI HTTP clients
    - errors/: Domain exceptions
    - helpers/: Shared utility functions

Example:
    Start the server with uvicorn:

    $ uvicorn realtime_proxy.server:app --host 0.0.0.0 --port 10000

Environment Variables:
    Required for the relay:
        - OPENAI_API_KEY: Bearer key for the realtime endpoint (and /openai/chat)

    Optional:
        - OPENAI_REALTIME_URL: Upstream WebSocket URL
          (default: wss://api.openai.com/v1/realtime?model=gpt-realtime)
        - GEMINI_API_KEY: Key for /gemini/* routes
        - GEMINI_API_VERSION: Gemini REST version (default: v1beta)
        - PORT: Listen port (default: 10000)
"""
