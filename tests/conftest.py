"""Shared test fixtures for the codegov test suite."""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from codegov.bindings import StaticBinding

SWAGGER_DEV = {"swagger": "2.0", "info": {"title": "dev"}, "host": "localhost:3000"}
SWAGGER_PROD = {"swagger": "2.0", "info": {"title": "prod"}, "host": "api.code.gov"}


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Create a project root with metadata and API documentation files."""
    root = tmp_path / "project"
    (root / "config").mkdir(parents=True)
    (root / "config" / "agency_metadata.json").write_text("[]")
    (root / "config" / "testing_agency_metadata.json").write_text("[]")
    (root / "swagger.json").write_text(json.dumps(SWAGGER_DEV))
    (root / "swagger-prod.json").write_text(json.dumps(SWAGGER_PROD))
    return root


@pytest.fixture
def write_env_file(asset_root: Path) -> Callable[[dict[str, str]], Path]:
    """Factory fixture to write a .env file into the asset root.

    Usage:
        def test_something(write_env_file):
            write_env_file({"PORT": "4000"})
    """

    def _write(values: dict[str, str]) -> Path:
        env_file = asset_root / ".env"
        env_file.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
        return env_file

    return _write


@pytest.fixture
def local_binding() -> StaticBinding:
    """Binding that reports local development."""
    return StaticBinding(is_local=True)


@pytest.fixture
def managed_binding() -> Callable[..., StaticBinding]:
    """Factory for bindings that report a managed platform."""

    def _binding(
        port: int | None = None,
        app_uris: list[str] | None = None,
        services: dict[str, Any] | None = None,
    ) -> StaticBinding:
        return StaticBinding(
            is_local=False,
            port=port,
            app_uris=app_uris,
            services=services
            if services is not None
            else {"code_gov_elasticsearch": {"uri": "http://es.internal:9200"}},
        )

    return _binding


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    """Clear the configuration cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from codegov.config import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Reset structlog configuration after each test.

    setup_logging binds the current sys.stderr, which pytest closes once the
    test's output capture ends; later tests must not log to that stream.
    """
    import structlog

    yield
    structlog.reset_defaults()
