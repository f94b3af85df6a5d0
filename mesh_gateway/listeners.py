"""Virtual gateway listener variants."""

import logging
from dataclasses import dataclass
from typing import Any

from mesh_gateway.config.models import HealthCheck, ListenerConfig, PortMapping, Protocol
from mesh_gateway.core.health_check import render_health_check
from mesh_gateway.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080

# Protocols a gateway listener can be built with
LISTENER_PROTOCOLS = (Protocol.HTTP, Protocol.HTTP2, Protocol.GRPC)


@dataclass(frozen=True)
class GatewayListener:
    """
    Listener declaration for a virtual gateway.

    Build instances with http(), http2() or grpc(); the protocol is the
    variant tag and never changes after construction.
    """

    protocol: Protocol
    port: int = DEFAULT_PORT
    health_check: HealthCheck | None = None

    def bind(self, scope: Any = None) -> ListenerConfig:
        """Render this listener. See bind()."""
        return bind(self, scope)


def http(port: int | None = None, health_check: HealthCheck | None = None) -> GatewayListener:
    """Return an HTTP listener, on port 8080 unless given."""
    return _build(Protocol.HTTP, port, health_check)


def http2(port: int | None = None, health_check: HealthCheck | None = None) -> GatewayListener:
    """Return an HTTP/2 listener, on port 8080 unless given."""
    return _build(Protocol.HTTP2, port, health_check)


def grpc(port: int | None = None, health_check: HealthCheck | None = None) -> GatewayListener:
    """Return a gRPC listener, on port 8080 unless given."""
    return _build(Protocol.GRPC, port, health_check)


def _build(
    protocol: Protocol, port: int | None, health_check: HealthCheck | None
) -> GatewayListener:
    return GatewayListener(
        protocol=protocol,
        port=port if port is not None else DEFAULT_PORT,
        health_check=health_check,
    )


def bind(listener: GatewayListener, scope: Any = None) -> ListenerConfig:
    """
    Render a listener into its configuration record.

    Args:
        listener: Listener to render
        scope: Rendering context, accepted for interface compatibility and unused

    Returns:
        Port mapping plus the resolved health check, if one was declared

    Raises:
        InvalidConfigurationError: If the listener protocol is not a gateway
            listener protocol or the health check is invalid
    """
    if listener.protocol not in LISTENER_PROTOCOLS:
        raise InvalidConfigurationError(
            f"Invalid listener protocol '{listener.protocol.value}', "
            f"must be one of: {', '.join(p.value for p in LISTENER_PROTOCOLS)}"
        )

    health_check = None
    if listener.health_check is not None:
        health_check = render_health_check(listener.health_check, listener.protocol, listener.port)

    logger.debug(
        f"Bound {listener.protocol.value} listener on port {listener.port} "
        f"(health check: {'yes' if health_check else 'no'})"
    )

    return ListenerConfig(
        port_mapping=PortMapping(port=listener.port, protocol=listener.protocol),
        health_check=health_check,
    )
