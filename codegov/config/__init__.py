"""Configuration loading for the Code.gov API.

This module provides the central configuration record for the server.
Settings are resolved once at startup from environment variables, the
hosting platform binding, and on-disk documents.

Usage:
    from codegov.config import get_config

    config = get_config()
    port = config.port
    origins = config.allowed_domains
"""

import os
from functools import lru_cache

from codegov.config.errors import (
    ConfigurationError,
    PlatformBindingError,
    ServiceBindingNotFoundError,
)
from codegov.config.models import ConfigurationRecord
from codegov.config.resolver import DEFAULT_ENVIRONMENT, ConfigResolver, resolve


@lru_cache(maxsize=1)
def get_config(environment_name: str | None = None) -> ConfigurationRecord:
    """Get the singleton configuration record.

    The environment name defaults to NODE_ENV, then "development". The
    platform binding is selected from the process environment.

    The result is cached for the lifetime of the process.
    Call `get_config.cache_clear()` to resolve again.

    Returns:
        ConfigurationRecord for the environment
    """
    name = environment_name or os.environ.get("NODE_ENV") or DEFAULT_ENVIRONMENT
    return resolve(name)


def reload_config(environment_name: str | None = None) -> ConfigurationRecord:
    """Clear the cache and resolve configuration again.

    Useful for testing or when configuration files have changed.

    Returns:
        Fresh ConfigurationRecord
    """
    get_config.cache_clear()
    if environment_name is None:
        return get_config()
    return get_config(environment_name)


__all__ = [
    "get_config",
    "reload_config",
    "resolve",
    "ConfigResolver",
    "ConfigurationRecord",
    "ConfigurationError",
    "PlatformBindingError",
    "ServiceBindingNotFoundError",
]
