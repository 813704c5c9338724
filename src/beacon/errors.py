"""Exception types raised by the Beacon core."""


class BeaconError(Exception):
    """Base class for all Beacon errors."""


class NotFoundError(BeaconError):
    """Raised when a resource URI or tool name is not registered.

    Attributes:
        kind: What was looked up ("resource" or "tool")
        key: The URI or name that was not found
    """

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key}")


class ExpressionError(BeaconError):
    """Raised when an arithmetic expression cannot be parsed or evaluated."""


class GenerationError(BeaconError):
    """Raised when an external text generator fails to produce a reply."""


class UnsupportedProviderError(BeaconError, ValueError):
    """Raised when an LLM configuration names an unknown provider."""

    def __init__(self, provider: str, supported=()):
        self.provider = provider
        message = f"Unsupported LLM provider: {provider!r}"
        if supported:
            message += f". Supported providers: {', '.join(supported)}"
        super().__init__(message)
