"""
FastAPI router for store locations and proximity search.

Two-segment paths are shared by two lookups: when the first segment
is a 5-digit zip code the request is a radius search around that zip
(/location/{zip_code}/{distance}); otherwise the segments are a
latitude/longitude pair (/location/{latitude}/{longitude}).
"""

import re
from typing import Optional, Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.application.catalog.geo_radius_query import GeoRadiusQuery
from catalog_api.domain.catalog.entities import Location, StoreDistance
from catalog_api.domain.catalog.geo import parse_latitude, parse_longitude
from catalog_api.domain.catalog.ports import LocationRepository
from catalog_api.interfaces.catalog.catch_all import READ_METHODS, add_catch_all
from catalog_api.interfaces.catalog.schemas import (
    ErrorResponse,
    LocationResponse,
    StoreDistanceResponse,
)
from catalog_api.shared.errors.classifier import EmptyPolicy, ErrorClassifier
from catalog_api.shared.errors.guard import GuardedRoute

ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")

_LOOKUP_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _present(location: Location) -> LocationResponse:
    return LocationResponse.model_validate(location)


def _present_many(locations: list[Location]) -> list[LocationResponse]:
    return [_present(location) for location in locations]


def _present_distances(matches: list[StoreDistance]) -> list[StoreDistanceResponse]:
    return [StoreDistanceResponse.model_validate(match) for match in matches]


def is_zip_code(segment: str) -> bool:
    return bool(ZIP_CODE_PATTERN.match(segment))


def build_location_router(
    repository: LocationRepository, radius_query: Optional[GeoRadiusQuery] = None
) -> APIRouter:
    """Build the /location router.

    Args:
        repository: Store location reference data.
        radius_query: Proximity search; built on ``repository`` when omitted.
    """
    router = APIRouter(prefix="/location", tags=["location"], route_class=GuardedRoute)
    classifier = ErrorClassifier("Location")
    radius_query = radius_query or GeoRadiusQuery(repository)

    @router.api_route(
        "",
        methods=READ_METHODS,
        response_model=list[LocationResponse],
        responses={500: {"model": ErrorResponse}},
        summary="List store locations",
    )
    async def list_locations() -> JSONResponse:
        """Return all locations. Reference data must not be empty."""
        outcome = await repository.list_all()
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present_many
        )

    @router.api_route(
        "/stores/{latitude}/{longitude}/{distance}",
        methods=READ_METHODS,
        response_model=list[StoreDistanceResponse],
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Stores within a distance of a coordinate",
    )
    async def stores_near_coordinates(
        latitude: str, longitude: str, distance: str
    ) -> JSONResponse:
        outcome = await radius_query.by_coordinates_and_distance(
            latitude, longitude, distance
        )
        return classifier.respond(outcome, present=_present_distances)

    @router.api_route(
        "/{zip_code}",
        methods=READ_METHODS,
        response_model=LocationResponse,
        responses=_LOOKUP_ERRORS,
        summary="Location by zip code",
    )
    async def get_location_by_zip(zip_code: str) -> JSONResponse:
        outcome = await repository.get_by_zip_code(zip_code)
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present
        )

    @router.api_route(
        "/{first}/{second}",
        methods=READ_METHODS,
        response_model=Union[list[StoreDistanceResponse], LocationResponse],
        responses=_LOOKUP_ERRORS,
        summary="Stores near a zip code, or the location at a coordinate",
    )
    async def get_by_zip_or_coordinates(first: str, second: str) -> JSONResponse:
        """Malformed coordinates raise InvalidQueryError, answered with 400."""
        if is_zip_code(first):
            outcome = await radius_query.by_zip_and_distance(first, second)
            return classifier.respond(outcome, present=_present_distances)

        latitude = parse_latitude(first)
        longitude = parse_longitude(second)
        outcome = await repository.get_by_coordinates(latitude, longitude)
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present
        )

    add_catch_all(router)
    return router
