"""Platform binding protocol and credential model.

A platform binding describes the hosting environment the process runs in:
whether it is a local checkout or a managed platform, the network identity
the platform assigned, and the services it bound to the application.
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class ServiceCredentials(BaseModel):
    """Connection details for a bound service.

    Only ``uri`` is interpreted; any other credential keys the platform
    provides are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    uri: str | None = Field(default=None, description="Service connection URI")


class PlatformBinding(Protocol):
    """Capability the resolver uses to read the hosting environment."""

    @property
    def is_local(self) -> bool:
        """True when not running under a managed platform."""
        ...

    @property
    def port(self) -> int | None:
        """Port assigned by the platform, if any."""
        ...

    @property
    def app_uris(self) -> list[str]:
        """Public routes mapped to the application, possibly empty."""
        ...

    def get_service_creds(self, name: str) -> ServiceCredentials:
        """Return credentials of the bound service called ``name``.

        Raises:
            ServiceBindingNotFoundError: If no such service is bound
        """
        ...
