"""Observability: structured logging.

Provides standardized logging primitives using structlog.
"""

from codegov.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
