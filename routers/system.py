"""
AVS Node API — System routes
  GET /health   liveness check
"""
from fastapi import APIRouter

from models import StatusResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=StatusResponse, summary="Liveness check")
async def health_check():
    """
    Returns 200 OK while the process is serving. Independent of the node's reported
    health; use GET /node/health for that.
    """
    return StatusResponse(status="ok", message="AVS node API is running")
