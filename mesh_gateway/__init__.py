"""Listener configuration for service mesh virtual gateways."""

from mesh_gateway.config.models import (
    AccessLog,
    HealthCheck,
    HealthCheckPolicy,
    ListenerConfig,
    PortMapping,
    Protocol,
)
from mesh_gateway.core.health_check import render_health_check
from mesh_gateway.core.validation import validate_health_check
from mesh_gateway.errors import InvalidConfigurationError
from mesh_gateway.gateway import VirtualGateway
from mesh_gateway.listeners import GatewayListener, bind, grpc, http, http2

__all__ = [
    "AccessLog",
    "GatewayListener",
    "HealthCheck",
    "HealthCheckPolicy",
    "InvalidConfigurationError",
    "ListenerConfig",
    "PortMapping",
    "Protocol",
    "VirtualGateway",
    "bind",
    "grpc",
    "http",
    "http2",
    "render_health_check",
    "validate_health_check",
]
