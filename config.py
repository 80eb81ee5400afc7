"""
AVS Node API — Configuration
All settings are read from environment variables with sensible defaults.
"""
import os

# ── Identity ──────────────────────────────────────────────────────────────────
NODE_NAME             = os.getenv("NODE_NAME", "NodeName")
NODE_VERSION          = os.getenv("NODE_VERSION", "v0.0.1")

# ── Server ────────────────────────────────────────────────────────────────────
HOST                  = os.getenv("HOST", "127.0.0.1")
PORT                  = int(os.getenv("PORT", "3000"))

# ── Admin push API ────────────────────────────────────────────────────────────
ADMIN_API_ENABLED     = os.getenv("ADMIN_API_ENABLED", "false").lower() == "true"
ADMIN_SECRET          = os.getenv("ADMIN_SECRET", "")  # Empty = dev mode (no auth)

# ── Rate limiting ─────────────────────────────────────────────────────────────
RATE_LIMIT_ENABLED    = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
QUERY_RATE_LIMIT      = os.getenv("QUERY_RATE_LIMIT", "120/minute")
ADMIN_RATE_LIMIT      = os.getenv("ADMIN_RATE_LIMIT", "30/minute")
