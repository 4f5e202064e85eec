"""Cloud Foundry binding built from VCAP_APPLICATION and VCAP_SERVICES."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from codegov.bindings.base import ServiceCredentials
from codegov.config.errors import PlatformBindingError, ServiceBindingNotFoundError
from codegov.observability.logging import get_logger

logger = get_logger(__name__)

VCAP_APPLICATION = "VCAP_APPLICATION"
VCAP_SERVICES = "VCAP_SERVICES"


class VcapApplication(BaseModel):
    """Subset of VCAP_APPLICATION the binding reads."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    port: int | None = None
    application_uris: list[str] = Field(default_factory=list)
    uris: list[str] = Field(default_factory=list)


class BoundService(BaseModel):
    """One entry of a VCAP_SERVICES label list."""

    model_config = ConfigDict(extra="ignore")

    name: str
    label: str | None = None
    credentials: ServiceCredentials = Field(default_factory=ServiceCredentials)


def _parse_json(environ: Mapping[str, str], key: str) -> Any:
    raw = environ.get(key)
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("platform_metadata_invalid", variable=key, error=str(e))
        raise PlatformBindingError(f"{key} is not valid JSON: {e}") from e


def _parse_port(value: str | None) -> int | None:
    if value and value.isdigit():
        return int(value)
    return None


class CloudFoundryBinding:
    """Binding for an application running on Cloud Foundry."""

    def __init__(
        self,
        application: VcapApplication,
        services: list[BoundService],
        env_port: int | None = None,
    ):
        self._application = application
        self._services = services
        self._env_port = env_port

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "CloudFoundryBinding":
        """Parse the platform metadata found in ``environ``.

        Raises:
            PlatformBindingError: If VCAP_APPLICATION or VCAP_SERVICES is malformed
        """
        app_data = _parse_json(environ, VCAP_APPLICATION)
        services_data = _parse_json(environ, VCAP_SERVICES)

        try:
            application = VcapApplication.model_validate(app_data)
            services = [
                BoundService.model_validate(entry)
                for entries in dict(services_data).values()
                for entry in entries
            ]
        except (ValidationError, TypeError, ValueError) as e:
            logger.error("platform_metadata_invalid", error=str(e))
            raise PlatformBindingError(f"Unexpected platform metadata: {e}") from e

        env_port = _parse_port(environ.get("VCAP_APP_PORT")) or _parse_port(
            environ.get("PORT")
        )
        return cls(application, services, env_port=env_port)

    @property
    def is_local(self) -> bool:
        return False

    @property
    def name(self) -> str | None:
        return self._application.name

    @property
    def port(self) -> int | None:
        return self._env_port or self._application.port

    @property
    def app_uris(self) -> list[str]:
        return list(self._application.application_uris or self._application.uris)

    def get_service_creds(self, name: str) -> ServiceCredentials:
        for service in self._services:
            if service.name == name:
                return service.credentials
        raise ServiceBindingNotFoundError(name)
