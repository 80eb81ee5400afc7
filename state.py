"""
AVS Node API — Node state store
Holds the node identity, aggregate health and the dependent-service registry.
Health and registry share one lock; identity is immutable and read lock-free.
"""
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from fastapi import Request

from models import HealthLevel, NodeIdentity, NodeService, ServiceStatus


class NodeStatePoisonedError(RuntimeError):
    """A write failed while holding the state lock; the shared state can no longer be trusted."""


class NodeStateStore:
    def __init__(self, identity: NodeIdentity, health: HealthLevel = HealthLevel.HEALTHY) -> None:
        self._identity = identity
        self._lock = threading.Lock()
        self._health = health
        self._services: List[NodeService] = []
        self._poisoned = False

    # ── Lock discipline ───────────────────────────────────────────────────────

    @contextmanager
    def _read(self) -> Iterator[None]:
        with self._lock:
            self._check_poisoned()
            yield

    @contextmanager
    def _write(self) -> Iterator[None]:
        with self._lock:
            self._check_poisoned()
            try:
                yield
            except BaseException:
                self._poisoned = True
                raise

    def _check_poisoned(self) -> None:
        if self._poisoned:
            raise NodeStatePoisonedError("Node state lock is poisoned by a failed write.")

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    # ── Identity ──────────────────────────────────────────────────────────────

    def get_identity(self) -> NodeIdentity:
        return self._identity

    # ── Aggregate health ──────────────────────────────────────────────────────

    def get_health(self) -> HealthLevel:
        with self._read():
            return self._health

    def set_health(self, level: HealthLevel) -> None:
        level = HealthLevel(level)
        with self._write():
            self._health = level

    # ── Service registry ──────────────────────────────────────────────────────

    def _index_of(self, service_id: str) -> Optional[int]:
        # Caller must hold the lock. First match wins.
        for i, s in enumerate(self._services):
            if s.id == service_id:
                return i
        return None

    def find_service(self, service_id: str) -> Optional[NodeService]:
        """Exact, case-sensitive lookup. Returns a copy, never the stored record."""
        with self._read():
            i = self._index_of(service_id)
            return self._services[i].model_copy() if i is not None else None

    def list_services(self) -> List[NodeService]:
        with self._read():
            return [s.model_copy() for s in self._services]

    def upsert_service(self, record: NodeService) -> bool:
        """
        Insert a record, or replace the one sharing its id in place (keeping its position).
        Returns True when a new record was appended.
        """
        record = record.model_copy()
        with self._write():
            i = self._index_of(record.id)
            if i is None:
                self._services.append(record)
                return True
            self._services[i] = record
            return False

    def set_service_status(self, service_id: str, status: ServiceStatus) -> bool:
        status = ServiceStatus(status)
        with self._write():
            i = self._index_of(service_id)
            if i is None:
                return False
            self._services[i] = self._services[i].model_copy(update={"status": status})
            return True

    def remove_service(self, service_id: str) -> bool:
        with self._write():
            i = self._index_of(service_id)
            if i is None:
                return False
            del self._services[i]
            return True


def get_store(request: Request) -> NodeStateStore:
    """FastAPI dependency: the store attached to the running app."""
    return request.app.state.store
