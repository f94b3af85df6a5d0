"""Health check policy resolution for gateway listeners."""

import logging
from datetime import timedelta

from mesh_gateway.config.models import HealthCheck, HealthCheckPolicy, Protocol
from mesh_gateway.core.duration import to_milliseconds
from mesh_gateway.core.validation import validate_health_check
from mesh_gateway.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/"
DEFAULT_HEALTHY_THRESHOLD = 2
DEFAULT_UNHEALTHY_THRESHOLD = 2
DEFAULT_INTERVAL = timedelta(seconds=5)
DEFAULT_TIMEOUT = timedelta(seconds=2)


def render_health_check(
    hc: HealthCheck, listener_protocol: Protocol, listener_port: int
) -> HealthCheckPolicy:
    """
    Resolve a declared health check against the listener it belongs to.

    Unset fields are filled in from the listener (protocol, port) or from
    defaults (path "/" for HTTP and HTTP2, thresholds of 2, 5s interval,
    2s timeout). The result is always passed through the bound checks.

    Args:
        hc: Declared health check
        listener_protocol: Protocol the listener was built with
        listener_port: Port the listener accepts connections on

    Returns:
        Resolved health check policy

    Raises:
        InvalidConfigurationError: If the declaration is not permitted or a
            resolved value is out of bounds
    """
    if hc.protocol == Protocol.TCP:
        raise InvalidConfigurationError("TCP health checks are not permitted for gateway listeners")

    protocol = hc.protocol if hc.protocol is not None else listener_protocol

    # Declared or inherited from the listener
    if protocol == Protocol.GRPC and hc.path:
        raise InvalidConfigurationError("The path property cannot be set with Protocol.GRPC")

    path = hc.path
    if not path:
        path = DEFAULT_PATH if protocol in (Protocol.HTTP, Protocol.HTTP2) else None

    policy = HealthCheckPolicy(
        healthy_threshold=(
            hc.healthy_threshold if hc.healthy_threshold is not None else DEFAULT_HEALTHY_THRESHOLD
        ),
        interval_millis=to_milliseconds(hc.interval if hc.interval is not None else DEFAULT_INTERVAL),
        path=path,
        port=hc.port if hc.port is not None else listener_port,
        # Resolved on its own rather than reusing `protocol` above
        protocol=hc.protocol or listener_protocol,
        timeout_millis=to_milliseconds(hc.timeout if hc.timeout is not None else DEFAULT_TIMEOUT),
        unhealthy_threshold=(
            hc.unhealthy_threshold
            if hc.unhealthy_threshold is not None
            else DEFAULT_UNHEALTHY_THRESHOLD
        ),
    )

    validate_health_check(policy)

    logger.debug(
        f"Resolved {policy.protocol.value} health check on port {policy.port} "
        f"for {listener_protocol.value} listener on port {listener_port}"
    )
    return policy
