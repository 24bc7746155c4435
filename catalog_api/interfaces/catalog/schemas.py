"""
Pydantic schemas for catalog API request/response validation.

ReviewPayload is the validation gate for review writes: a body that
fails it is rejected with 400 before any repository call.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.domain.catalog.entities import ReviewDraft

RATING_MIN = 1
RATING_MAX = 5


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


class ReviewPayload(BaseModel):
    """Request body for creating or replacing a review.

    Attributes:
        product_id: Id of the reviewed product (>= 1).
        reviewer: Display name of the author (1-100 chars).
        rating: Star rating, 1 to 5.
        content: Review text (1-2000 chars).
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    product_id: int = Field(..., ge=1, description="Reviewed product id")
    reviewer: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX)
    content: str = Field(..., min_length=1, max_length=2000)

    def to_draft(self) -> ReviewDraft:
        return ReviewDraft(
            product_id=self.product_id,
            reviewer=self.reviewer,
            rating=self.rating,
            content=self.content,
        )


class ReviewResponse(BaseModel):
    """A stored review."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    reviewer: str
    rating: int
    content: str


class UpdateReviewResponse(BaseModel):
    """Response for a successful review update."""

    result: ReviewResponse


class LocationResponse(BaseModel):
    """A store location."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: str
    latitude: float
    longitude: float


class StoreDistanceResponse(BaseModel):
    """A store and its distance in miles from the query point."""

    model_config = ConfigDict(from_attributes=True)

    location: LocationResponse
    distance_miles: float


class ProductResponse(BaseModel):
    """A catalog product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
