"""Error types for gateway listener configuration."""


class InvalidConfigurationError(ValueError):
    """
    Raised when a listener or health check declaration cannot be rendered.

    Subclasses ValueError so callers that already treat configuration
    problems as ValueError keep working.
    """
