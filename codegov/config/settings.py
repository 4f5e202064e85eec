"""Typed view over the environment variables a resolution reads."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Store read by EnvStoreSettingsSource for the resolution in progress
_env_store: ContextVar[Mapping[str, str] | None] = ContextVar("env_store", default=None)


@contextmanager
def use_env_store(store: Mapping[str, str]) -> Iterator[None]:
    """Make ``store`` the variable source for settings built in this block."""
    token = _env_store.set(store)
    try:
        yield
    finally:
        _env_store.reset(token)


class EnvStoreSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads upper-cased field names from the active store."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from the active store."""
        store = _env_store.get() or {}
        return store.get(field_name.upper()), field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                data[key] = value
        return data


class EnvironmentVariables(BaseSettings):
    """Raw string values of every variable the resolver consults.

    Unset and empty variables are both ``None``. Values are kept as strings;
    the resolver owns their interpretation (exact ``"true"`` comparison for
    flags, integer parsing with fallback for numbers).
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    port: str | None = None
    logger_level: str | None = None
    elasticsearch_service_name: str | None = None
    es_uri: str | None = None
    api_url: str | None = None
    use_hsts: str | None = None
    hsts_max_age: str | None = None
    hsts_preload: str | None = None
    hsts_subdomains: str | None = None
    get_remote_metadata: str | None = None
    remote_metadata_location: str | None = None
    node_env: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_unset(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read only from constructor arguments and the active store.

        The process environment is not a source; callers seed the store
        from it together with any .env values.
        """
        return (
            init_settings,
            EnvStoreSettingsSource(settings_cls),
        )

    @classmethod
    def from_store(cls, store: Mapping[str, str]) -> "EnvironmentVariables":
        """Build the view over ``store``."""
        with use_env_store(store):
            return cls()


def is_true(value: str | None) -> bool:
    """Exact ``"true"`` check used for every boolean variable."""
    return value == "true"
