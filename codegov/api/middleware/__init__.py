"""API middleware package."""

from codegov.api.middleware.hsts import HSTSMiddleware

__all__ = ["HSTSMiddleware"]
