"""Integration tests for the admin push routes."""

from httpx import ASGITransport, AsyncClient

import auth
from main import create_app
from models import HealthLevel, ServiceStatus
from state import NodeStateStore


class TestAdminHealth:
    async def test_set_health(self, client: AsyncClient, store: NodeStateStore) -> None:
        response = await client.put("/admin/health", json={"health": "PartiallyHealthy"})

        assert response.status_code == 200
        assert store.get_health() is HealthLevel.PARTIALLY_HEALTHY
        assert (await client.get("/node/health")).status_code == 206

    async def test_rejects_unknown_level(self, client: AsyncClient, store: NodeStateStore) -> None:
        response = await client.put("/admin/health", json={"health": "Degraded"})

        assert response.status_code == 422
        assert store.get_health() is HealthLevel.HEALTHY


class TestAdminServices:
    async def test_register_then_replace(self, client: AsyncClient, store: NodeStateStore) -> None:
        body = {"id": "svc1", "name": "Signer", "description": "BLS signer", "status": "Up"}

        created = await client.put("/admin/services/svc1", json=body)
        assert created.status_code == 201

        replaced = await client.put("/admin/services/svc1", json={**body, "status": "Down"})
        assert replaced.status_code == 200
        assert len(store.list_services()) == 1
        assert store.find_service("svc1").status is ServiceStatus.DOWN

    async def test_defaults_to_initializing(self, client: AsyncClient) -> None:
        await client.put("/admin/services/svc1", json={"id": "svc1", "name": "Signer"})
        assert (await client.get("/node/services/svc1/health")).status_code == 206

    async def test_path_and_body_id_must_match(self, client: AsyncClient,
                                               store: NodeStateStore) -> None:
        response = await client.put("/admin/services/svc1", json={"id": "svc2", "name": "Signer"})

        assert response.status_code == 400
        assert store.list_services() == []

    async def test_rejects_empty_name(self, client: AsyncClient, store: NodeStateStore) -> None:
        response = await client.put("/admin/services/svc1", json={"id": "svc1", "name": " "})

        assert response.status_code == 422
        assert store.list_services() == []

    async def test_id_with_slash(self, client: AsyncClient, store: NodeStateStore) -> None:
        body = {"id": "ns/svc", "name": "Signer", "status": "Up"}

        assert (await client.put("/admin/services/ns%2Fsvc", json=body)).status_code == 201
        assert store.find_service("ns/svc").status is ServiceStatus.UP

        patched = await client.patch("/admin/services/ns/svc", json={"status": "Down"})
        assert patched.status_code == 200
        assert (await client.get("/node/services/ns%2Fsvc/health")).status_code == 503

        assert (await client.delete("/admin/services/ns%2Fsvc")).status_code == 200
        assert store.find_service("ns/svc") is None

    async def test_patch_status(self, client: AsyncClient) -> None:
        await client.put("/admin/services/svc1", json={"id": "svc1", "name": "Signer", "status": "Up"})
        assert (await client.get("/node/services/svc1/health")).status_code == 200

        response = await client.patch("/admin/services/svc1", json={"status": "Down"})
        assert response.status_code == 200
        assert (await client.get("/node/services/svc1/health")).status_code == 503

    async def test_patch_unknown_service(self, client: AsyncClient) -> None:
        response = await client.patch("/admin/services/ghost", json={"status": "Up"})
        assert response.status_code == 404

    async def test_delete(self, client: AsyncClient) -> None:
        await client.put("/admin/services/svc1", json={"id": "svc1", "name": "Signer", "status": "Up"})

        assert (await client.delete("/admin/services/svc1")).status_code == 200
        assert (await client.get("/node/services/svc1/health")).status_code == 404
        assert (await client.delete("/admin/services/svc1")).status_code == 404


class TestAdminAuth:
    async def test_secret_required_when_configured(self, client: AsyncClient,
                                                   store: NodeStateStore, monkeypatch) -> None:
        monkeypatch.setattr(auth, "ADMIN_SECRET", "s3cret")

        denied = await client.put("/admin/health", json={"health": "Unhealthy"})
        assert denied.status_code == 401
        assert store.get_health() is HealthLevel.HEALTHY

        allowed = await client.put(
            "/admin/health",
            json={"health": "Unhealthy"},
            headers={"X-Node-Admin-Secret": "s3cret"},
        )
        assert allowed.status_code == 200
        assert store.get_health() is HealthLevel.UNHEALTHY

    async def test_admin_routes_absent_when_disabled(self, store: NodeStateStore) -> None:
        app = create_app(store=store, admin_api=False)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.put("/admin/health", json={"health": "Unhealthy"})

        assert response.status_code in (404, 405)
        assert store.get_health() is HealthLevel.HEALTHY
