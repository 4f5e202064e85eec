"""Configuration Resolver - layered startup configuration.

Resolves each setting from, in order of precedence:
1. Environment variables (process environment, plus .env values in local mode)
2. Values detected from the platform binding
3. Hard-coded defaults

Derived settings (allowed origins, API documentation host, HSTS policy) are
computed from the resolved primary settings in the same call, and the record
is only built once every value is known.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from codegov.bindings.base import PlatformBinding
from codegov.config.errors import ServiceBindingNotFoundError
from codegov.config.loader import (
    ENV_FILE_NAME,
    build_env_store,
    get_project_root,
    load_env_file,
    load_json_document,
)
from codegov.config.models import PROD_ENVS, ConfigurationRecord
from codegov.config.settings import EnvironmentVariables, is_true
from codegov.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENVIRONMENT = "development"
DEFAULT_PORT = 3000
DEFAULT_ES_URI = "http://localhost:9200"
DEFAULT_ES_SERVICE_NAME = "code_gov_elasticsearch"
DEFAULT_HSTS_MAX_AGE = 31536000
DEFAULT_API_HOST = "api.code.gov"
PRODUCTION_ORIGIN = "https://api.data.gov"
TESTING_ENVIRONMENT = "testing"

AGENCY_METADATA_FILE = Path("config") / "agency_metadata.json"
TESTING_AGENCY_METADATA_FILE = Path("config") / "testing_agency_metadata.json"
SWAGGER_FILE = Path("swagger.json")
SWAGGER_PROD_FILE = Path("swagger-prod.json")


def _parse_int(name: str, value: str | None) -> int | None:
    """Parse a non-negative integer variable, None when unset or unusable."""
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        number = -1
    if number < 0:
        logger.warning("invalid_integer_env", variable=name, value=value)
        return None
    return number


def _without_userinfo(uri: str) -> str:
    """Drop any user:password@ part so a bound service URI can be logged."""
    parts = urlsplit(uri)
    if "@" not in parts.netloc:
        return uri
    return urlunsplit(parts._replace(netloc=parts.netloc.rpartition("@")[2]))


class ConfigResolver:
    """Builds a ConfigurationRecord from a binding, variables and files.

    The resolver never writes to ``os.environ``. Each call to ``resolve``
    builds its own variable store from ``environ`` and, in local mode,
    the project's .env file.
    """

    def __init__(
        self,
        binding: PlatformBinding,
        environ: Mapping[str, str] | None = None,
        root: Path | None = None,
    ):
        """Initialize the resolver.

        Args:
            binding: Hosting environment adapter chosen by the caller
            environ: Variable snapshot, defaults to the process environment
            root: Directory holding .env, config/ and the swagger documents
        """
        self._binding = binding
        self._environ = environ
        self._root = root

    def resolve(self, environment_name: str = DEFAULT_ENVIRONMENT) -> ConfigurationRecord:
        """Resolve the configuration for ``environment_name``.

        Raises:
            ServiceBindingNotFoundError: Managed mode without the search service bound
            json.JSONDecodeError: If an API documentation file is malformed
            OSError: If a required file cannot be read
        """
        environ = dict(os.environ if self._environ is None else self._environ)
        root = self._root or get_project_root(environ)
        is_prod = environment_name in PROD_ENVS
        is_local = self._binding.is_local

        env_file: dict[str, str] = {}
        if is_local:
            env_file = load_env_file(root / ENV_FILE_NAME)
            logger.debug("env_file_loaded", path=str(root / ENV_FILE_NAME), keys=len(env_file))

        env = EnvironmentVariables.from_store(build_env_store(environ, env_file))

        port = self._resolve_port(env)
        api_url = self._resolve_api_url(env, port)
        get_remote_metadata = is_true(env.get_remote_metadata)

        record = ConfigurationRecord(
            environment=environment_name,
            is_prod=is_prod,
            logger_level=env.logger_level or ("INFO" if is_prod else "DEBUG"),
            use_hsts=is_true(env.use_hsts) if env.use_hsts is not None else is_prod,
            hsts_max_age=self._resolve_hsts_max_age(env),
            hsts_preload=is_true(env.hsts_preload),
            hsts_subdomains=is_true(env.hsts_subdomains),
            port=port,
            get_remote_metadata=get_remote_metadata,
            es_host=self._resolve_es_host(env, is_local),
            agency_endpoints_file=self._resolve_metadata_file(
                env, environment_name, root, get_remote_metadata
            ),
            swagger_document=self._load_swagger_document(root, is_prod, api_url),
            allowed_domains=(
                f"http://localhost:{port}",
                f"http://127.0.0.1:{port}",
                PRODUCTION_ORIGIN if is_prod else "*",
            ),
        )

        logger.info(
            "config_resolved",
            environment=environment_name,
            is_prod=is_prod,
            is_local=is_local,
            port=record.port,
            es_host=_without_userinfo(record.es_host),
            agency_endpoints_file=record.agency_endpoints_file,
        )
        return record

    def _resolve_port(self, env: EnvironmentVariables) -> int:
        port = _parse_int("PORT", env.port)
        if port is not None:
            return port
        return self._binding.port or DEFAULT_PORT

    def _resolve_hsts_max_age(self, env: EnvironmentVariables) -> int:
        max_age = _parse_int("HSTS_MAX_AGE", env.hsts_max_age)
        return DEFAULT_HSTS_MAX_AGE if max_age is None else max_age

    def _resolve_es_host(self, env: EnvironmentVariables, is_local: bool) -> str:
        if is_local:
            return env.es_uri or DEFAULT_ES_URI

        service_name = env.elasticsearch_service_name or DEFAULT_ES_SERVICE_NAME
        try:
            credentials = self._binding.get_service_creds(service_name)
        except ServiceBindingNotFoundError:
            logger.error("service_binding_missing", service_name=service_name)
            raise
        return credentials.uri or DEFAULT_ES_URI

    def _resolve_metadata_file(
        self,
        env: EnvironmentVariables,
        environment_name: str,
        root: Path,
        get_remote_metadata: bool,
    ) -> str:
        if get_remote_metadata and env.remote_metadata_location:
            return env.remote_metadata_location

        testing = TESTING_ENVIRONMENT in (env.node_env, environment_name)
        relative = TESTING_AGENCY_METADATA_FILE if testing else AGENCY_METADATA_FILE
        return str(root / relative)

    def _resolve_api_url(self, env: EnvironmentVariables, port: int) -> str:
        if env.api_url:
            return env.api_url
        uris = self._binding.app_uris
        if uris:
            return f"{uris[0]}/api"
        return f"0.0.0.0:{port}"

    def _load_swagger_document(
        self, root: Path, is_prod: bool, api_url: str
    ) -> dict[str, Any]:
        document = load_json_document(root / (SWAGGER_PROD_FILE if is_prod else SWAGGER_FILE))
        if not isinstance(document, dict):
            raise ValueError("API documentation must be a JSON object")
        return {**document, "host": api_url or DEFAULT_API_HOST}


def resolve(
    environment_name: str = DEFAULT_ENVIRONMENT,
    binding: PlatformBinding | None = None,
    environ: Mapping[str, str] | None = None,
    root: Path | None = None,
) -> ConfigurationRecord:
    """Resolve configuration with an explicit or locally-selected binding.

    When ``binding`` is None the binding is selected from ``environ`` (or the
    process environment).
    """
    if binding is None:
        from codegov.bindings import select_binding

        binding = select_binding(os.environ if environ is None else environ)
    return ConfigResolver(binding, environ=environ, root=root).resolve(environment_name)
