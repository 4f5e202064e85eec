"""Configuration exception hierarchy.

Missing inputs never raise; they fall back to documented defaults. The
exceptions here cover the cases where falling back would produce a
plausible-looking but wrong configuration.
"""


class ConfigurationError(Exception):
    """Base exception for configuration resolution failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PlatformBindingError(ConfigurationError):
    """Raised when platform metadata (VCAP_*) cannot be parsed."""


class ServiceBindingNotFoundError(PlatformBindingError):
    """Raised when no bound service matches the requested name."""

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name
        super().__init__(f"No service bound with name: {service_name}")
