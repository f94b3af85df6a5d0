"""Unit tests for virtual gateway rendering."""

import pytest

from mesh_gateway.config.models import AccessLog, HealthCheck, Protocol
from mesh_gateway.errors import InvalidConfigurationError
from mesh_gateway.gateway import VirtualGateway
from mesh_gateway.listeners import grpc, http, http2


class TestVirtualGateway:
    def test_default_listener(self) -> None:
        gateway = VirtualGateway("ingress")

        assert len(gateway.listeners) == 1
        assert gateway.listeners[0].protocol == Protocol.HTTP
        assert gateway.render() == {
            "virtualGatewayName": "ingress",
            "spec": {"listeners": [{"portMapping": {"port": 8080, "protocol": "http"}}]},
        }

    def test_full_render(self) -> None:
        gateway = VirtualGateway(
            "ingress",
            listeners=[grpc(port=50051, health_check=HealthCheck(unhealthy_threshold=4))],
            access_log=AccessLog("/dev/stdout"),
            mesh_name="demo",
        )

        assert gateway.render() == {
            "virtualGatewayName": "ingress",
            "meshName": "demo",
            "spec": {
                "listeners": [
                    {
                        "portMapping": {"port": 50051, "protocol": "grpc"},
                        "healthCheck": {
                            "protocol": "grpc",
                            "port": 50051,
                            "healthyThreshold": 2,
                            "unhealthyThreshold": 4,
                            "intervalMillis": 5000,
                            "timeoutMillis": 2000,
                        },
                    }
                ],
                "logging": {"accessLog": {"file": {"path": "/dev/stdout"}}},
            },
        }

    def test_at_most_one_listener(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="at most one listener"):
            VirtualGateway("ingress", listeners=[http(), http2()])

    def test_add_listener_to_default(self) -> None:
        gateway = VirtualGateway("ingress")

        with pytest.raises(InvalidConfigurationError, match="at most one listener"):
            gateway.add_listener(grpc())

    def test_name_required(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="must have a name"):
            VirtualGateway("")

    def test_render_surfaces_listener_errors(self) -> None:
        gateway = VirtualGateway(
            "ingress", listeners=[http(health_check=HealthCheck(protocol=Protocol.TCP))]
        )

        with pytest.raises(InvalidConfigurationError, match="TCP health checks"):
            gateway.render()

    def test_render_is_idempotent(self) -> None:
        gateway = VirtualGateway("ingress", listeners=[http2(health_check=HealthCheck())])

        assert gateway.render() == gateway.render()
