"""
AVS Node API — Node introspection routes
  GET /node                               node identity + API version
  GET /node/health                        aggregate node health (status code only)
  GET /node/services                      list registered dependent services
  GET /node/services/{service_id}/health  dependent service health (status code only)

Identity and health queries are not rate limited: their only outcomes are the
status codes in the tables of status_codes.py.
"""
from fastapi import APIRouter, Depends, Request, Response

from config import QUERY_RATE_LIMIT
from limiter import limiter
from models import NodeInfoResponse, ServiceListResponse
from state import NodeStateStore, get_store
from status_codes import node_health_status, service_health_status

router = APIRouter(prefix="/node", tags=["Node"])

_HEALTH_RESPONSES = {
    200: {"description": "Healthy"},
    206: {"description": "Partially healthy"},
    503: {"description": "Unhealthy"},
}


@router.get("", response_model=NodeInfoResponse, summary="Node identity")
async def node_info(store: NodeStateStore = Depends(get_store)):
    """Returns the node name, its software version and the introspection API spec version."""
    return NodeInfoResponse.from_identity(store.get_identity())


@router.get("/health", summary="Aggregate node health", response_class=Response,
            responses=_HEALTH_RESPONSES)
async def node_health(store: NodeStateStore = Depends(get_store)):
    """
    No body. The status code carries the node's overall health:
    **200** healthy, **206** partially healthy, **503** unhealthy.
    """
    return Response(status_code=node_health_status(store.get_health()))


@router.get("/services", response_model=ServiceListResponse, summary="List dependent services")
@limiter.limit(QUERY_RATE_LIMIT)
async def list_services(request: Request, store: NodeStateStore = Depends(get_store)):
    """All registered dependent services, in registration order."""
    services = store.list_services()
    return ServiceListResponse(count=len(services), services=services)


# `path` lets an id carry "/" (sent raw or as %2F); the trailing /health still anchors the match
@router.get("/services/{service_id:path}/health", summary="Dependent service health",
            response_class=Response,
            responses={
                200: {"description": "Up"},
                206: {"description": "Initializing"},
                503: {"description": "Down"},
                404: {"description": "No service registered under this id"},
            })
async def service_health(service_id: str, store: NodeStateStore = Depends(get_store)):
    """
    No body. The status code carries the service's status:
    **200** up, **206** initializing, **503** down, **404** unknown service id.
    The id is matched exactly (case-sensitive).
    """
    service = store.find_service(service_id)
    return Response(status_code=service_health_status(service.status if service else None))
