"""
AVS Node API — Pydantic models (state records, request bodies + response shapes)
"""
from enum import Enum
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict, field_validator

SPEC_VERSION = "v0.0.1"  # Version of the node introspection API contract


class HealthLevel(str, Enum):
    HEALTHY           = "Healthy"
    PARTIALLY_HEALTHY = "PartiallyHealthy"
    UNHEALTHY         = "Unhealthy"


class ServiceStatus(str, Enum):
    UP           = "Up"
    DOWN         = "Down"
    INITIALIZING = "Initializing"


class NodeIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    spec_version: ClassVar[str] = SPEC_VERSION  # Fixed; not settable per node


class NodeService(BaseModel):
    id: str               # Registry key, matched byte-for-byte
    name: str
    description: str = ""
    status: ServiceStatus = ServiceStatus.INITIALIZING

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Service name cannot be empty")
        return v


# ── Responses ─────────────────────────────────────────────────────────────────

class NodeInfoResponse(BaseModel):
    node_name: str
    spec_version: str
    node_version: str

    @classmethod
    def from_identity(cls, identity: NodeIdentity) -> "NodeInfoResponse":
        return cls(
            node_name=identity.name,
            spec_version=SPEC_VERSION,
            node_version=identity.version,
        )


class ServiceListResponse(BaseModel):
    count: int
    services: List[NodeService]


class StatusResponse(BaseModel):
    status: str
    message: str


# ── Admin request bodies ──────────────────────────────────────────────────────

class HealthUpdate(BaseModel):
    health: HealthLevel


class ServiceStatusUpdate(BaseModel):
    status: ServiceStatus
