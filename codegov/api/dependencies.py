"""FastAPI dependencies for the configuration record."""

from typing import Annotated

from fastapi import Depends, Request

from codegov.config import ConfigurationRecord


def get_app_config(request: Request) -> ConfigurationRecord:
    """Return the record the application was created with."""
    return request.app.state.config  # type: ignore[no-any-return]


ConfigDep = Annotated[ConfigurationRecord, Depends(get_app_config)]
