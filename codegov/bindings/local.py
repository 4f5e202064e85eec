"""Binding for a developer machine with no platform metadata."""

from codegov.bindings.base import ServiceCredentials
from codegov.config.errors import ServiceBindingNotFoundError


class LocalBinding:
    """Local development: no assigned port, no routes, no bound services."""

    @property
    def is_local(self) -> bool:
        return True

    @property
    def port(self) -> int | None:
        return None

    @property
    def app_uris(self) -> list[str]:
        return []

    def get_service_creds(self, name: str) -> ServiceCredentials:
        raise ServiceBindingNotFoundError(name)
