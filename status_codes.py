"""
AVS Node API — Health to HTTP status mapping
One table per enum; handlers never branch on health values themselves.
"""
from fastapi import status

from models import HealthLevel, ServiceStatus

NODE_HEALTH_STATUS = {
    HealthLevel.HEALTHY:           status.HTTP_200_OK,
    HealthLevel.PARTIALLY_HEALTHY: status.HTTP_206_PARTIAL_CONTENT,
    HealthLevel.UNHEALTHY:         status.HTTP_503_SERVICE_UNAVAILABLE,
}

SERVICE_HEALTH_STATUS = {
    ServiceStatus.UP:           status.HTTP_200_OK,
    ServiceStatus.DOWN:         status.HTTP_503_SERVICE_UNAVAILABLE,
    ServiceStatus.INITIALIZING: status.HTTP_206_PARTIAL_CONTENT,
}

SERVICE_NOT_FOUND = status.HTTP_404_NOT_FOUND


def node_health_status(level: HealthLevel) -> int:
    return NODE_HEALTH_STATUS[level]


def service_health_status(service_status: ServiceStatus | None) -> int:
    """Map a service's status to an HTTP code; None means the service is not registered."""
    if service_status is None:
        return SERVICE_NOT_FOUND
    return SERVICE_HEALTH_STATUS[service_status]
