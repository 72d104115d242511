"""Process-level server configuration."""

import os


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "10000"))


__all__ = ["HOST", "PORT"]
