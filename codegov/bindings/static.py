"""Binding with explicit values, for tests and scripted startups."""

from collections.abc import Mapping

from codegov.bindings.base import ServiceCredentials
from codegov.config.errors import ServiceBindingNotFoundError


class StaticBinding:
    """Binding whose every answer is supplied by the caller.

    Useful for unit testing and for reproducing a platform environment
    without VCAP_* variables.
    """

    def __init__(
        self,
        is_local: bool = True,
        port: int | None = None,
        app_uris: list[str] | None = None,
        services: Mapping[str, ServiceCredentials | Mapping[str, str]] | None = None,
    ):
        """Initialize the binding.

        Args:
            is_local: Whether to report local mode
            port: Assigned port, or None
            app_uris: Public routes
            services: Dict mapping service name to its credentials
        """
        self._is_local = is_local
        self._port = port
        self._app_uris = list(app_uris or [])
        self._services = {
            name: creds
            if isinstance(creds, ServiceCredentials)
            else ServiceCredentials.model_validate(dict(creds))
            for name, creds in (services or {}).items()
        }
        self._lookups: list[str] = []

    @property
    def is_local(self) -> bool:
        return self._is_local

    @property
    def port(self) -> int | None:
        return self._port

    @property
    def app_uris(self) -> list[str]:
        return list(self._app_uris)

    @property
    def lookups(self) -> list[str]:
        """Service names requested so far, for test assertions."""
        return self._lookups

    def get_service_creds(self, name: str) -> ServiceCredentials:
        self._lookups.append(name)
        try:
            return self._services[name]
        except KeyError:
            raise ServiceBindingNotFoundError(name) from None
