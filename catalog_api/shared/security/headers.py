"""
Secure HTTP headers middleware.

Stamps every response, including error responses produced by the
fault responder, with a fixed set of restrictive headers.
"""

from collections.abc import Mapping
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds secure HTTP headers to every response."""

    def __init__(
        self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
