"""
Async handler guard.

Wraps a route handler so that any fault it raises, before or after
an await, is forwarded once to the centralized fault responder
instead of escaping the request.
"""

from collections.abc import Awaitable, Callable
from functools import wraps

from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from catalog_api.shared.errors.handlers import respond_to_fault

Handler = Callable[[Request], Awaitable[Response]]


def guard(handler: Handler) -> Handler:
    """Return ``handler`` adapted to hand every raised fault to the responder.

    Framework request errors are re-raised untouched; the application's
    registered handlers already format them.
    """

    @wraps(handler)
    async def guarded(request: Request) -> Response:
        try:
            return await handler(request)
        except (HTTPException, RequestValidationError):
            raise
        except Exception as exc:
            return respond_to_fault(request, exc)

    return guarded


class GuardedRoute(APIRoute):
    """APIRoute whose request handler is wrapped by :func:`guard`."""

    def get_route_handler(self) -> Handler:
        return guard(super().get_route_handler())
