"""
Domain-specific errors for the catalog bounded context.

Expected failures (not found, invalid input) travel as outcomes,
not exceptions. The errors below are reserved for conditions that
must interrupt a request. No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RouteNotFoundError(CatalogDomainError):
    """Raised by a catch-all route when no handler matches a request."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"The requested resource {path} was not found on this server."
        )
        self.path = path


class InvalidQueryError(CatalogDomainError):
    """Raised when query input cannot be interpreted at all."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
