"""Strict-Transport-Security response header."""

from collections.abc import Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

HSTS_HEADER = "Strict-Transport-Security"


class HSTSMiddleware(BaseHTTPMiddleware):
    """Adds the HSTS header to every response.

    The header value is computed once from the configuration record,
    e.g. ``max-age=31536000; includeSubDomains; preload``.
    """

    def __init__(self, app: Callable[..., Any], header_value: str) -> None:
        """Initialize the middleware.

        Args:
            app: ASGI application
            header_value: Strict-Transport-Security value
        """
        super().__init__(app)
        self._header_value = header_value

    async def dispatch(  # type: ignore[override]
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        response: Response = await call_next(request)  # type: ignore[misc]
        response.headers.setdefault(HSTS_HEADER, self._header_value)
        return response
