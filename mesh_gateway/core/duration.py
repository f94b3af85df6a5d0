"""Duration parsing and conversion."""

import re
from datetime import timedelta

from mesh_gateway.errors import InvalidConfigurationError

_DURATION_RE = re.compile(r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>ms|s|m)\s*$")

_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
}


def parse_duration(value: int | float | str | timedelta) -> timedelta:
    """
    Parse a duration value from configuration.

    Supports formats:
    - 5 or 2.5 (seconds)
    - "500ms", "5s", "1m"
    - timedelta instances (returned unchanged)

    Args:
        value: Raw duration value

    Returns:
        Parsed duration

    Raises:
        InvalidConfigurationError: If format is invalid or negative
    """
    if isinstance(value, timedelta):
        return value

    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"Invalid duration '{value}'")

    if isinstance(value, (int, float)):
        if value < 0:
            raise InvalidConfigurationError(f"Invalid duration '{value}', must be >= 0")
        seconds: float = value
    elif isinstance(value, str):
        match = _DURATION_RE.match(value)
        if not match:
            raise InvalidConfigurationError(
                f"Invalid duration '{value}', expected a number of seconds or '<n>ms', '<n>s', '<n>m'"
            )
        seconds = float(match["value"]) * _UNIT_SECONDS[match["unit"]]
    else:
        raise InvalidConfigurationError(f"Invalid duration type: {type(value).__name__}")

    try:
        return timedelta(seconds=seconds)
    except (OverflowError, ValueError) as e:
        raise InvalidConfigurationError(f"Invalid duration '{value}': {e}") from e


def to_milliseconds(duration: timedelta) -> int:
    """
    Convert a duration to a whole number of milliseconds.

    Raises:
        InvalidConfigurationError: If the duration has a sub-millisecond part
    """
    millis, remainder = divmod(duration, timedelta(milliseconds=1))
    if remainder:
        raise InvalidConfigurationError(
            f"Duration {duration} cannot be expressed in whole milliseconds"
        )
    return int(millis)
