"""Health check resolution and validation."""

from mesh_gateway.core.duration import parse_duration, to_milliseconds
from mesh_gateway.core.health_check import render_health_check
from mesh_gateway.core.validation import HEALTH_CHECK_THRESHOLDS, validate_health_check

__all__ = [
    "HEALTH_CHECK_THRESHOLDS",
    "parse_duration",
    "render_health_check",
    "to_milliseconds",
    "validate_health_check",
]
