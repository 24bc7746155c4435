"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts the domain requires from the data store.
Every method is a suspension point and returns an Outcome; expected
domain failures (missing entity) are never raised.
"""

from abc import ABC, abstractmethod

from catalog_api.domain.catalog.entities import (
    Location,
    Product,
    Review,
    ReviewDraft,
)
from catalog_api.domain.catalog.outcome import Outcome


class ReviewRepository(ABC):
    """Port for the review lifecycle."""

    @abstractmethod
    async def list_all(self) -> Outcome[list[Review]]:
        """Return every review."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, review_id: int) -> Outcome[Review]:
        """Return one review, or NotFound."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, draft: ReviewDraft) -> Outcome[Review]:
        """Persist a new review and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, review_id: int, draft: ReviewDraft) -> Outcome[Review]:
        """Replace the fields of an existing review, or NotFound."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, review_id: int) -> Outcome[Review]:
        """Remove a review and return it, or NotFound."""
        raise NotImplementedError


class LocationRepository(ABC):
    """Port for store location reference data."""

    @abstractmethod
    async def list_all(self) -> Outcome[list[Location]]:
        """Return every store location."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_zip_code(self, zip_code: str) -> Outcome[Location]:
        """Return the location registered under ``zip_code``, or NotFound."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_coordinates(
        self, latitude: float, longitude: float
    ) -> Outcome[Location]:
        """Return the location at exactly these coordinates, or NotFound."""
        raise NotImplementedError


class ProductRepository(ABC):
    """Port for product reference data."""

    @abstractmethod
    async def list_all(self) -> Outcome[list[Product]]:
        """Return every product."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, product_id: int) -> Outcome[Product]:
        """Return one product, or NotFound."""
        raise NotImplementedError
