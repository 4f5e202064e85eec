"""API documentation endpoint."""

from typing import Any

from fastapi import APIRouter

from codegov.api.dependencies import ConfigDep

router = APIRouter()


@router.get("/api-docs/swagger.json")
async def swagger_document(config: ConfigDep) -> dict[str, Any]:
    """Serve the API documentation descriptor, host already stamped."""
    return config.swagger_dict()
