"""Configuration package."""

from mesh_gateway.config.models import (
    AccessLog,
    GatewayConfig,
    HealthCheck,
    HealthCheckPolicy,
    ListenerConfig,
    ListenerSettings,
    PortMapping,
    Protocol,
)

__all__ = [
    "AccessLog",
    "GatewayConfig",
    "HealthCheck",
    "HealthCheckPolicy",
    "ListenerConfig",
    "ListenerSettings",
    "PortMapping",
    "Protocol",
]
