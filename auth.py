"""
AVS Node API — Auth dependencies
  - verify_admin_secret: shared operator secret header guarding the admin push API
"""
from fastapi import Header, HTTPException

from config import ADMIN_SECRET


async def verify_admin_secret(x_node_admin_secret: str = Header(default="")) -> None:
    """
    Validate the operator secret sent with every admin request.
    Set ADMIN_SECRET env var to enable. If unset, validation is skipped (dev mode).
    """
    if ADMIN_SECRET and x_node_admin_secret != ADMIN_SECRET:
        raise HTTPException(status_code=401, detail="Invalid or missing admin secret.")
