"""
Catch-all terminal route for a resource router.

Must be added after every real route of the router. Any method or
path left unmatched under the router prefix raises RouteNotFoundError,
which the fault responder turns into a 404 naming the path.

A bare trailing slash (``/review/``) is not a miss: it is redirected
to the same path without the slash, keeping the method and body.
"""

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from catalog_api.domain.catalog.errors import RouteNotFoundError

READ_METHODS = ["GET", "HEAD"]
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def unknown_route(request: Request) -> RedirectResponse:
    path = request.url.path
    if request.path_params.get("path") == "" and path.endswith("/"):
        return RedirectResponse(
            request.url.replace(path=path.rstrip("/")), status_code=307
        )
    raise RouteNotFoundError(path)


def add_catch_all(router: APIRouter) -> None:
    """Register the terminal route on ``router`` for its prefix and below."""
    for path in ("", "/{path:path}"):
        router.add_api_route(
            path,
            unknown_route,
            methods=ALL_METHODS,
            include_in_schema=False,
        )
