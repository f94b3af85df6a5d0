"""Tests for the command line entry point."""

import json

import yaml

from mesh_gateway.main import main

CONFIG = """
gateway:
  name: edge
  listeners:
    - protocol: grpc
      port: 50051
      health_check: {}
"""


class TestMain:
    def test_renders_json(self, write_config, capsys) -> None:
        exit_code = main(["-c", str(write_config(CONFIG))])

        assert exit_code == 0
        rendered = json.loads(capsys.readouterr().out)
        assert rendered["virtualGatewayName"] == "edge"
        assert rendered["spec"]["listeners"][0]["healthCheck"]["protocol"] == "grpc"
        assert "path" not in rendered["spec"]["listeners"][0]["healthCheck"]

    def test_renders_yaml(self, write_config, capsys) -> None:
        exit_code = main(["-c", str(write_config(CONFIG)), "--format", "yaml"])

        assert exit_code == 0
        rendered = yaml.safe_load(capsys.readouterr().out)
        assert rendered["spec"]["listeners"][0]["portMapping"] == {"port": 50051, "protocol": "grpc"}

    def test_missing_config(self, tmp_path, capsys) -> None:
        exit_code = main(["-c", str(tmp_path / "nope.yaml")])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, write_config, capsys) -> None:
        path = write_config(
            "gateway:\n"
            "  name: edge\n"
            "  listeners:\n"
            "    - protocol: grpc\n"
            "      health_check:\n"
            "        protocol: grpc\n"
            "        path: /x\n"
        )

        exit_code = main(["-c", str(path)])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_malformed_yaml(self, write_config, capsys) -> None:
        exit_code = main(["-c", str(write_config("gateway:\n  name: [unclosed\n"))])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_overflowing_duration(self, write_config, capsys) -> None:
        path = write_config(
            "gateway:\n"
            "  name: edge\n"
            "  listeners:\n"
            "    - protocol: http\n"
            "      health_check:\n"
            "        interval: 99999999999999s\n"
        )

        exit_code = main(["-c", str(path)])

        assert exit_code == 1
        assert capsys.readouterr().out == ""
