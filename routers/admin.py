"""
AVS Node API — Admin routes (state push from the owning process)
  PUT    /admin/health                  set aggregate node health
  PUT    /admin/services/{service_id}   register or replace a dependent service
  PATCH  /admin/services/{service_id}   update a dependent service's status
  DELETE /admin/services/{service_id}   unregister a dependent service

Mounted only when ADMIN_API_ENABLED=true.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from auth import verify_admin_secret
from config import ADMIN_RATE_LIMIT
from limiter import limiter
from models import HealthUpdate, NodeService, ServiceStatusUpdate, StatusResponse
from state import NodeStateStore, get_store

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(verify_admin_secret)])


@router.put("/health", response_model=StatusResponse, summary="Set node health")
@limiter.limit(ADMIN_RATE_LIMIT)
async def set_health(request: Request, data: HealthUpdate,
                     store: NodeStateStore = Depends(get_store)):
    store.set_health(data.health)
    print(f"[admin] Node health set to {data.health.value}.", flush=True)
    return StatusResponse(status="ok", message=f"Health set to {data.health.value}.")


@router.put("/services/{service_id:path}", response_model=StatusResponse,
            summary="Register or replace a service")
@limiter.limit(ADMIN_RATE_LIMIT)
async def upsert_service(request: Request, response: Response, service_id: str,
                         data: NodeService, store: NodeStateStore = Depends(get_store)):
    """
    Registers the service, or replaces the record already registered under this id
    (its position in the registry is kept). Returns **201** when newly registered.
    """
    if data.id != service_id:
        raise HTTPException(status_code=400, detail="Body id does not match the path service id.")

    created = store.upsert_service(data)
    response.status_code = 201 if created else 200
    action = "Registered" if created else "Replaced"
    print(f"[admin] {action} service {service_id!r} ({data.status.value}).", flush=True)
    return StatusResponse(status="ok", message=f"{action} service {service_id}.")


@router.patch("/services/{service_id:path}", response_model=StatusResponse,
              summary="Update a service's status")
@limiter.limit(ADMIN_RATE_LIMIT)
async def update_service_status(request: Request, service_id: str, data: ServiceStatusUpdate,
                                store: NodeStateStore = Depends(get_store)):
    if not store.set_service_status(service_id, data.status):
        raise HTTPException(status_code=404, detail="No service registered under this id.")
    print(f"[admin] Service {service_id!r} is now {data.status.value}.", flush=True)
    return StatusResponse(status="ok", message=f"Service {service_id} is {data.status.value}.")


@router.delete("/services/{service_id:path}", response_model=StatusResponse,
               summary="Unregister a service")
@limiter.limit(ADMIN_RATE_LIMIT)
async def remove_service(request: Request, service_id: str,
                         store: NodeStateStore = Depends(get_store)):
    if not store.remove_service(service_id):
        raise HTTPException(status_code=404, detail="No service registered under this id.")
    print(f"[admin] Removed service {service_id!r}.", flush=True)
    return StatusResponse(status="ok", message=f"Removed service {service_id}.")
