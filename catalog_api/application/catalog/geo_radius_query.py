"""
Use case: Find stores within a radius of a zip code or coordinate.

Input: zip code or latitude/longitude, plus a radius in miles
Output: Outcome[list[StoreDistance]] sorted closest first
Side effects: None (read-only query).
Failure cases:
    - Invalid: radius <= 0, non-numeric or out-of-range coordinates
    - NotFound: zip code absent from the location reference data
    - Failure: location data could not be read
"""

import logging

from catalog_api.domain.catalog.entities import StoreDistance
from catalog_api.domain.catalog.errors import InvalidQueryError
from catalog_api.domain.catalog.geo import (
    Number,
    parse_latitude,
    parse_longitude,
    parse_radius,
    stores_within_radius,
)
from catalog_api.domain.catalog.outcome import Invalid, Ok, Outcome
from catalog_api.domain.catalog.ports import LocationRepository

logger = logging.getLogger(__name__)


class GeoRadiusQuery:
    """Resolves a query point and filters store locations by distance."""

    def __init__(self, locations: LocationRepository) -> None:
        """Initialize the use case.

        Args:
            locations: Repository providing store location reference data.
        """
        self._locations = locations

    async def by_zip_and_distance(
        self, zip_code: str, radius: Number
    ) -> Outcome[list[StoreDistance]]:
        """Return stores within ``radius`` miles of the given zip code.

        Args:
            zip_code: Postal code registered in the location data.
            radius: Search radius in miles (> 0).

        Returns:
            Ok with the matching stores, or NotFound for an unknown zip.
        """
        try:
            parse_radius(radius)
        except InvalidQueryError as exc:
            return Invalid(exc.message)

        origin = await self._locations.get_by_zip_code(zip_code)
        if not isinstance(origin, Ok):
            logger.warning("Cannot resolve zip code %s: %s", zip_code, origin)
            return origin

        return await self.by_coordinates_and_distance(
            origin.value.latitude, origin.value.longitude, radius
        )

    async def by_coordinates_and_distance(
        self, latitude: Number, longitude: Number, radius: Number
    ) -> Outcome[list[StoreDistance]]:
        """Return stores within ``radius`` miles of a coordinate.

        An empty list is a successful result.

        Args:
            latitude: Decimal degrees in [-90, 90].
            longitude: Decimal degrees in [-180, 180].
            radius: Search radius in miles (> 0).

        Returns:
            Ok with stores sorted by ascending distance.
        """
        try:
            lat = parse_latitude(latitude)
            lng = parse_longitude(longitude)
            miles = parse_radius(radius)
        except InvalidQueryError as exc:
            return Invalid(exc.message)

        candidates = await self._locations.list_all()
        if not isinstance(candidates, Ok):
            return candidates

        matches = stores_within_radius(lat, lng, miles, candidates.value)
        logger.info(
            "Radius query lat=%.5f lng=%.5f radius=%.2f: %d of %d stores",
            lat,
            lng,
            miles,
            len(matches),
            len(candidates.value),
        )
        return Ok(matches)
