"""The resolved configuration record and its fixed values."""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

PROD_ENVS: tuple[str, ...] = ("prod", "production")

TERM_TYPES_TO_SEARCH: tuple[str, ...] = (
    "name",
    "agency.name",
    "agency.acronym",
    "tags",
    "languages",
)

VALID_QUERY_PARAMS: tuple[str, ...] = (
    "license",
    "name",
    "agency.name",
    "permissions.usageType",
    "agency.acronym",
    "status",
    "vcs",
    "measurementType.method",
    "language",
    "created",
    "lastModified",
    "metadataLastUpdated",
)

# Metadata schema versions accepted for repository updates: 1.0 and 1.0.x
UPDATE_REPO_REGEX: re.Pattern[str] = re.compile(r"(1\.0)(\.\d)?")


def freeze_document(value: Any) -> Any:
    """Return a read-only copy of a decoded JSON value.

    Objects become MappingProxyType views and arrays become tuples, at every
    level of nesting.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_document(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_document(item) for item in value)
    return value


def thaw_document(value: Any) -> Any:
    """Return a plain dict/list copy of a frozen document."""
    if isinstance(value, Mapping):
        return {key: thaw_document(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_document(item) for item in value]
    return value


class ConfigurationRecord(BaseModel):
    """Fully resolved configuration for one environment.

    Built once at startup by ConfigResolver and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    environment: str = Field(description="Environment name the record was resolved for")
    prod_envs: tuple[str, ...] = Field(default=PROD_ENVS)
    is_prod: bool

    logger_level: str = Field(description="Minimum log level")

    term_types_to_search: tuple[str, ...] = Field(default=TERM_TYPES_TO_SEARCH)
    valid_query_params: tuple[str, ...] = Field(default=VALID_QUERY_PARAMS)
    update_repo_regex: re.Pattern[str] = Field(default=UPDATE_REPO_REGEX)

    use_hsts: bool
    hsts_max_age: int = Field(ge=0, description="HSTS max-age in seconds")
    hsts_preload: bool
    hsts_subdomains: bool

    port: int = Field(description="HTTP listen port")

    get_remote_metadata: bool
    es_host: str = Field(description="Elasticsearch endpoint")
    agency_endpoints_file: str = Field(description="Agency metadata location")

    swagger_document: Mapping[str, Any] = Field(
        description="API documentation descriptor, read-only at every level"
    )
    allowed_domains: tuple[str, str, str] = Field(description="CORS allowed origins")

    @field_validator("swagger_document", mode="after")
    @classmethod
    def freeze_swagger_document(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze_document(value)

    @field_serializer("swagger_document")
    def serialize_swagger_document(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return thaw_document(value)

    def swagger_dict(self) -> dict[str, Any]:
        """Mutable copy of the API documentation descriptor."""
        return thaw_document(self.swagger_document)

    def hsts_header(self) -> str:
        """Value of the Strict-Transport-Security header for this record."""
        parts = [f"max-age={self.hsts_max_age}"]
        if self.hsts_subdomains:
            parts.append("includeSubDomains")
        if self.hsts_preload:
            parts.append("preload")
        return "; ".join(parts)
