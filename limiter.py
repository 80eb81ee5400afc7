"""
AVS Node API — Rate limiter (shared instance)
Imported by main.py and all routers that apply @limiter.limit().
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import RATE_LIMIT_ENABLED


def get_client_ip(request: Request) -> str:
    """Use X-Forwarded-For's first hop when behind a proxy, fall back to remote address."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


limiter = Limiter(key_func=get_client_ip, enabled=RATE_LIMIT_ENABLED)
