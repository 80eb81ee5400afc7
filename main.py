"""
AVS Node API
============
Node introspection endpoint for a long-running AVS node.

Exposes the node's identity, its aggregate health and the health of each dependent
service. The node API never checks health itself: the owning process pushes state
into the NodeStateStore (in-process, or over the optional admin API) and the query
routes report it as HTTP status codes.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

import config
from limiter import limiter
from models import NodeIdentity
from routers import admin, node, system
from state import NodeStatePoisonedError, NodeStateStore


# ── Lifespan ──────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    identity = app.state.store.get_identity()
    print(
        f"[node] {identity.name} {identity.version} serving node API {identity.spec_version}.",
        flush=True,
    )
    yield
    # State is process-lifetime only; nothing to flush on shutdown
    print(f"[node] {identity.name} shutting down.", flush=True)


# ── Error handlers ────────────────────────────────────────────────────────────

async def _poisoned_state_handler(request: Request, exc: NodeStatePoisonedError) -> JSONResponse:
    print(f"[node] Refusing {request.method} {request.url.path}: {exc}", flush=True)
    return JSONResponse(status_code=500, content={"detail": "Node state is corrupted."})


# ── App ───────────────────────────────────────────────────────────────────────

def create_app(store: NodeStateStore | None = None, admin_api: bool | None = None) -> FastAPI:
    """
    Build the node API around a state store.

    The owning process keeps a reference to `store` and pushes health updates into it.
    If no store is given, one is created from NODE_NAME / NODE_VERSION with Healthy
    aggregate health and an empty service registry.
    """
    if store is None:
        store = NodeStateStore(NodeIdentity(name=config.NODE_NAME, version=config.NODE_VERSION))
    if admin_api is None:
        admin_api = config.ADMIN_API_ENABLED

    app = FastAPI(
        lifespan=lifespan,
        title="AVS Node API",
        description="""
Introspection API for an **AVS node**.

## Endpoints

- `GET /node` returns the node name, node version and API spec version
- `GET /node/health` reports aggregate health in the status code only:
  **200** healthy, **206** partially healthy, **503** unhealthy
- `GET /node/services/{service_id}/health` reports one dependent service:
  **200** up, **206** initializing, **503** down, **404** unknown id

## State

All state is in memory and resets on restart. The node API does not run health
checks; it reports whatever the owning process last pushed.
""",
        version="0.1.0",
        license_info={"name": "MIT"},
    )

    app.state.store = store
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(NodeStatePoisonedError, _poisoned_state_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "PUT", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(node.router)
    app.include_router(system.router)
    if admin_api:
        app.include_router(admin.router)

    return app


def run() -> None:
    """Serve the node API (entry point for CLI). uvicorn handles SIGINT/SIGTERM."""
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
