"""Bound checks for resolved health check policies."""

import logging

from mesh_gateway.config.models import HealthCheckPolicy
from mesh_gateway.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

# Accepted (min, max) per rendered field, inclusive
HEALTH_CHECK_THRESHOLDS: dict[str, tuple[int, int]] = {
    "healthyThreshold": (2, 10),
    "intervalMillis": (5000, 300000),
    "port": (1, 65535),
    "timeoutMillis": (2000, 60000),
    "unhealthyThreshold": (2, 10),
}


def validate_health_check(policy: HealthCheckPolicy) -> None:
    """
    Check a resolved health check policy against the accepted ranges.

    Args:
        policy: Resolved health check policy

    Raises:
        InvalidConfigurationError: If any value is outside its accepted range,
            or the timeout is not shorter than the interval
    """
    rendered = policy.to_dict()

    for key, (minimum, maximum) in HEALTH_CHECK_THRESHOLDS.items():
        value = rendered[key]
        if value < minimum:
            raise InvalidConfigurationError(
                f"The value of '{key}' is below the minimum threshold "
                f"(expected >={minimum}, got {value})"
            )
        if value > maximum:
            raise InvalidConfigurationError(
                f"The value of '{key}' is above the maximum threshold "
                f"(expected <={maximum}, got {value})"
            )

    if policy.timeout_millis >= policy.interval_millis:
        raise InvalidConfigurationError(
            f"The value of 'timeoutMillis' must be less than 'intervalMillis' "
            f"(got {policy.timeout_millis} >= {policy.interval_millis})"
        )

    logger.debug(f"Health check policy passed bound checks: {rendered}")
