"""Virtual gateway definition."""

import logging
from typing import Any

from mesh_gateway.config.models import AccessLog, ListenerConfig
from mesh_gateway.errors import InvalidConfigurationError
from mesh_gateway.listeners import GatewayListener, bind, http

logger = logging.getLogger(__name__)


class VirtualGateway:
    """
    Virtual gateway with its listener and access log.

    A gateway has exactly one listener. When none is given, an HTTP
    listener on port 8080 is added.
    """

    def __init__(
        self,
        name: str,
        listeners: list[GatewayListener] | None = None,
        access_log: AccessLog | None = None,
        mesh_name: str | None = None,
    ):
        """
        Initialize virtual gateway.

        Args:
            name: Virtual gateway name
            listeners: Listeners to add (default: one HTTP listener)
            access_log: Access log destination (optional)
            mesh_name: Name of the mesh the gateway belongs to (optional)
        """
        if not name:
            raise InvalidConfigurationError("VirtualGateway must have a name")

        self.name = name
        self.access_log = access_log
        self.mesh_name = mesh_name
        self.listeners: list[GatewayListener] = []

        if listeners:
            for listener in listeners:
                self.add_listener(listener)
        else:
            self.add_listener(http())

    def add_listener(self, listener: GatewayListener) -> None:
        """
        Add a listener to the gateway.

        Raises:
            InvalidConfigurationError: If the gateway already has a listener
        """
        if len(self.listeners) >= 1:
            raise InvalidConfigurationError("VirtualGateway may have at most one listener")

        self.listeners.append(listener)
        logger.debug(
            f"Added {listener.protocol.value} listener on port {listener.port} "
            f"to gateway '{self.name}'"
        )

    def bind_listeners(self, scope: Any = None) -> list[ListenerConfig]:
        """Render every listener of the gateway."""
        return [bind(listener, scope) for listener in self.listeners]

    def render(self, scope: Any = None) -> dict[str, Any]:
        """
        Render the gateway resource properties.

        Args:
            scope: Rendering context passed through to listener binding

        Returns:
            Gateway properties in the shape expected by the template engine
        """
        spec: dict[str, Any] = {
            "listeners": [config.to_dict() for config in self.bind_listeners(scope)],
        }
        if self.access_log is not None:
            spec["logging"] = {"accessLog": self.access_log.to_dict()}

        rendered: dict[str, Any] = {"virtualGatewayName": self.name}
        if self.mesh_name:
            rendered["meshName"] = self.mesh_name
        rendered["spec"] = spec
        return rendered
