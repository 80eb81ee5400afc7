"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

# Rate limits are shared process-wide; disable them before config is imported.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app
from models import NodeIdentity
from state import NodeStateStore


@pytest.fixture
def store() -> NodeStateStore:
    """A fresh store: Healthy, empty registry."""
    return NodeStateStore(NodeIdentity(name="NodeName", version="v0.0.1"))


@pytest.fixture
async def client(store: NodeStateStore) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against the node API with the admin routes mounted."""
    app = create_app(store=store, admin_api=True)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
