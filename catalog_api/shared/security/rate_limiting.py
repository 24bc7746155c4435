"""
Rate limiting setup.

Uses slowapi with a per-application limiter so that each app
instance (and each test client) keeps its own counters.

The default limit is enforced by an application-wide dependency
that runs inside the matched route, not by slowapi's middleware.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(
    default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True
) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        default_limit: Limit applied to every route, e.g. "60/minute".
        enabled: Turn limiting off entirely when False.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


async def enforce_rate_limit(request: Request) -> None:
    """Count the request against the application's default limit.

    Raises:
        RateLimitExceeded: The client is over the limit for this path.
    """
    limiter: Limiter = request.app.state.limiter
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer 429 with the standard error body."""
    return JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}"},
    )
