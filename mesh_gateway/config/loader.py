"""Configuration loader and validator."""

import logging
from pathlib import Path
from typing import Any

import yaml

from mesh_gateway.config.models import (
    AccessLog,
    GatewayConfig,
    HealthCheck,
    ListenerSettings,
    Protocol,
)
from mesh_gateway.core.duration import parse_duration
from mesh_gateway.errors import InvalidConfigurationError
from mesh_gateway.gateway import VirtualGateway
from mesh_gateway.listeners import LISTENER_PROTOCOLS, GatewayListener, grpc, http, http2

logger = logging.getLogger(__name__)

_LISTENER_BUILDERS = {
    Protocol.HTTP: http,
    Protocol.HTTP2: http2,
    Protocol.GRPC: grpc,
}


def parse_protocol(value: Any) -> Protocol:
    """
    Parse protocol configuration string.

    Args:
        value: Protocol name, case-insensitive ("http", "http2", "grpc", "tcp")

    Returns:
        Parsed protocol

    Raises:
        InvalidConfigurationError: If the protocol is unknown
    """
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"Invalid protocol '{value}', must be a string")
    try:
        return Protocol(value.lower())
    except ValueError as e:
        raise InvalidConfigurationError(
            f"Invalid protocol '{value}', must be one of: {', '.join(p.value for p in Protocol)}"
        ) from e


def _parse_int(data: dict[str, Any], key: str) -> int | None:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"'{key}' must be an integer, got '{value}'")
    return value


def parse_health_check(hc_data: Any) -> HealthCheck:
    """
    Parse a health_check section.

    Only structure and types are checked here; defaults and bounds are
    applied when the listener is bound.

    Raises:
        InvalidConfigurationError: If the section is malformed
    """
    if not isinstance(hc_data, dict):
        raise InvalidConfigurationError("health_check must be a dictionary")

    protocol = hc_data.get("protocol")
    path = hc_data.get("path")
    if path is not None and not isinstance(path, str):
        raise InvalidConfigurationError(f"health_check 'path' must be a string, got '{path}'")

    interval = hc_data.get("interval")
    timeout = hc_data.get("timeout")

    return HealthCheck(
        protocol=parse_protocol(protocol) if protocol is not None else None,
        port=_parse_int(hc_data, "port"),
        path=path,
        healthy_threshold=_parse_int(hc_data, "healthy_threshold"),
        unhealthy_threshold=_parse_int(hc_data, "unhealthy_threshold"),
        interval=parse_duration(interval) if interval is not None else None,
        timeout=parse_duration(timeout) if timeout is not None else None,
    )


def load_config(config_path: str | Path) -> GatewayConfig:
    """
    Load and validate gateway configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Parsed configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        InvalidConfigurationError: If configuration is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    return parse_config(raw_config)


def parse_config(raw_config: Any) -> GatewayConfig:
    """
    Validate an already parsed configuration document.

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not isinstance(raw_config, dict) or "gateway" not in raw_config:
        raise InvalidConfigurationError("Configuration must contain 'gateway' section")

    gw_data = raw_config["gateway"]
    if not isinstance(gw_data, dict):
        raise InvalidConfigurationError("gateway must be a dictionary")
    if not gw_data.get("name"):
        raise InvalidConfigurationError("Gateway must have 'name' field")

    raw_listeners = gw_data.get("listeners") or []
    if not isinstance(raw_listeners, list):
        raise InvalidConfigurationError("gateway 'listeners' must be a list")

    listeners: list[ListenerSettings] = []

    for idx, listener_data in enumerate(raw_listeners):
        try:
            if not isinstance(listener_data, dict):
                raise InvalidConfigurationError("Listener must be a dictionary")

            # Parse protocol (default: http)
            protocol = parse_protocol(listener_data.get("protocol", "http"))
            if protocol not in LISTENER_PROTOCOLS:
                raise InvalidConfigurationError(
                    f"Invalid listener protocol '{protocol.value}', "
                    f"must be one of: {', '.join(p.value for p in LISTENER_PROTOCOLS)}"
                )

            # Parse health check configuration (optional)
            health_check: HealthCheck | None = None
            if listener_data.get("health_check") is not None:
                health_check = parse_health_check(listener_data["health_check"])

            listener = ListenerSettings(
                protocol=protocol,
                port=_parse_int(listener_data, "port"),
                health_check=health_check,
            )

            listeners.append(listener)
            logger.info(
                f"Loaded listener #{idx}: {protocol.value} on port "
                f"{listener.port if listener.port is not None else 'default'} "
                f"(health check: {'yes' if health_check else 'no'})"
            )

        except (KeyError, ValueError, TypeError) as e:
            raise InvalidConfigurationError(f"Invalid configuration for listener #{idx}: {e}") from e

    access_log = gw_data.get("access_log")
    if access_log is not None and not isinstance(access_log, str):
        raise InvalidConfigurationError("gateway 'access_log' must be a file path")

    mesh_name = gw_data.get("mesh")
    if mesh_name is not None and not isinstance(mesh_name, str):
        raise InvalidConfigurationError("gateway 'mesh' must be a string")

    config = GatewayConfig(
        name=str(gw_data["name"]),
        listeners=listeners,
        mesh_name=mesh_name,
        access_log=access_log,
    )

    logger.info(f"Successfully loaded gateway '{config.name}' with {len(listeners)} listener(s)")
    return config


def build_gateway(config: GatewayConfig) -> VirtualGateway:
    """
    Build a virtual gateway from parsed configuration.

    Raises:
        InvalidConfigurationError: If the gateway cannot hold the listeners
    """
    listeners: list[GatewayListener] = [
        _LISTENER_BUILDERS[settings.protocol](settings.port, settings.health_check)
        for settings in config.listeners
    ]

    return VirtualGateway(
        name=config.name,
        listeners=listeners,
        access_log=AccessLog(config.access_log) if config.access_log else None,
        mesh_name=config.mesh_name,
    )
