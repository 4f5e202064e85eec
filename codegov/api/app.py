"""FastAPI application factory.

Creates the application and applies the configuration record to it:
logging level, CORS origins, HSTS policy, and the documentation and status
routes. Serve with:

    uvicorn codegov.api.app:create_app --factory
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codegov.api.middleware.hsts import HSTSMiddleware
from codegov.api.routes import register_routes
from codegov.config import ConfigurationRecord, get_config
from codegov.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(config: ConfigurationRecord | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Resolved configuration; resolved from the environment when None

    Returns:
        Configured FastAPI application
    """
    if config is None:
        # Redacting logger must be in place before resolution logs bound services
        setup_logging(
            level=os.environ.get("LOGGER_LEVEL") or "INFO",
            format=os.environ.get("LOG_FORMAT") or "json",
        )
        config = get_config()

    setup_logging(
        level=config.logger_level,
        format=os.environ.get("LOG_FORMAT") or ("json" if config.is_prod else "console"),
    )

    app = FastAPI(
        title="Code.gov API",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.allowed_domains),
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    if config.use_hsts:
        app.add_middleware(HSTSMiddleware, header_value=config.hsts_header())

    register_routes(app)

    logger.info(
        "app_created",
        environment=config.environment,
        allowed_domains=config.allowed_domains,
        use_hsts=config.use_hsts,
    )

    return app

