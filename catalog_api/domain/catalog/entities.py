"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """A store location. Immutable reference data."""

    id: int
    name: str
    zip_code: str
    latitude: float
    longitude: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True)
class Review:
    """A product review. Identity is assigned by the data layer."""

    id: int
    product_id: int
    reviewer: str
    rating: int
    content: str


@dataclass(frozen=True)
class ReviewDraft:
    """Review fields supplied by a client, before an id is assigned."""

    product_id: int
    reviewer: str
    rating: int
    content: str


@dataclass(frozen=True)
class Product:
    """A catalog product. Read-only reference data."""

    id: int
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class StoreDistance:
    """A store paired with its great-circle distance from a query point."""

    location: Location
    distance_miles: float
