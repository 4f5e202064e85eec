"""API route registration."""

from fastapi import FastAPI

from codegov.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI) -> None:
    """Register all routers with the FastAPI application."""
    from codegov.api.routes.docs import router as docs_router
    from codegov.api.routes.status import router as status_router

    app.include_router(status_router, prefix="/api", tags=["Status"])
    app.include_router(docs_router, tags=["Docs"])

    logger.debug("routes_registered")
