"""Configuration models."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any


class Protocol(str, Enum):
    """Protocol spoken on a listener or used by a health check."""

    HTTP = "http"
    HTTP2 = "http2"
    GRPC = "grpc"
    TCP = "tcp"


@dataclass(frozen=True)
class HealthCheck:
    """
    Declared health check for a listener.

    Every field is optional; unset fields are filled in from the listener
    when the health check is rendered.
    """

    protocol: Protocol | None = None
    port: int | None = None
    path: str | None = None
    healthy_threshold: int | None = None
    unhealthy_threshold: int | None = None
    interval: timedelta | None = None  # Time between probes (default: 5s)
    timeout: timedelta | None = None  # Time to wait for a probe response (default: 2s)


@dataclass(frozen=True)
class HealthCheckPolicy:
    """Fully resolved health check policy."""

    protocol: Protocol
    port: int
    healthy_threshold: int
    unhealthy_threshold: int
    interval_millis: int
    timeout_millis: int
    path: str | None = None  # Only set for HTTP and HTTP2

    def to_dict(self) -> dict[str, Any]:
        """Render in the shape expected by the template engine."""
        rendered: dict[str, Any] = {
            "healthyThreshold": self.healthy_threshold,
            "intervalMillis": self.interval_millis,
            "port": self.port,
            "protocol": self.protocol.value,
            "timeoutMillis": self.timeout_millis,
            "unhealthyThreshold": self.unhealthy_threshold,
        }
        if self.path is not None:
            rendered["path"] = self.path
        return rendered


@dataclass(frozen=True)
class PortMapping:
    """Port and protocol a listener accepts connections on."""

    port: int
    protocol: Protocol

    def to_dict(self) -> dict[str, Any]:
        return {"port": self.port, "protocol": self.protocol.value}


@dataclass(frozen=True)
class ListenerConfig:
    """Rendered configuration for a single gateway listener."""

    port_mapping: PortMapping
    health_check: HealthCheckPolicy | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the listener, omitting the health check when none was declared."""
        rendered: dict[str, Any] = {"portMapping": self.port_mapping.to_dict()}
        if self.health_check is not None:
            rendered["healthCheck"] = self.health_check.to_dict()
        return rendered


@dataclass(frozen=True)
class AccessLog:
    """File based access log for a virtual gateway."""

    path: str

    def to_dict(self) -> dict[str, Any]:
        return {"file": {"path": self.path}}


@dataclass
class ListenerSettings:
    """Listener section of a gateway configuration file."""

    protocol: Protocol
    port: int | None = None
    health_check: HealthCheck | None = None


@dataclass
class GatewayConfig:
    """Root configuration."""

    name: str
    listeners: list[ListenerSettings] = field(default_factory=list)
    mesh_name: str | None = None
    access_log: str | None = None
