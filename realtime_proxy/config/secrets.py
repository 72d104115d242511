"""Provider credentials.

Both keys are optional at import time. A missing OPENAI_API_KEY makes the
relay refuse every connection with 1011 (and /openai/chat answer 500); a
missing GEMINI_API_KEY only disables the /gemini/* handlers.
"""

import os


OPENAI_API_KEY = (os.getenv("OPENAI_API_KEY", "") or "").strip()
GEMINI_API_KEY = (os.getenv("GEMINI_API_KEY", "") or "").strip()


__all__ = ["OPENAI_API_KEY", "GEMINI_API_KEY"]
