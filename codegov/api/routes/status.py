"""Status endpoint."""

from fastapi import APIRouter

from codegov.api.dependencies import ConfigDep

router = APIRouter()


@router.get("/status")
async def status(config: ConfigDep) -> dict[str, object]:
    """Report that the server is up and which configuration it runs with."""
    return {
        "status": "ok",
        "environment": config.environment,
        "is_prod": config.is_prod,
        "port": config.port,
    }
