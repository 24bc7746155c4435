"""
Great-circle distance math for store proximity search.

Uses a spherical-earth (haversine) approximation. All distances
are in miles; coordinates are decimal degrees.
"""

import math
from typing import Iterable, Union

from catalog_api.domain.catalog.entities import Location, StoreDistance
from catalog_api.domain.catalog.errors import InvalidQueryError

EARTH_RADIUS_MILES = 3958.8

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

Number = Union[int, float, str]


def _to_float(value: Number, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidQueryError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidQueryError(f"{name} must be finite, got {value!r}")
    return number


def parse_latitude(value: Number) -> float:
    """Return ``value`` as a latitude, or raise InvalidQueryError."""
    latitude = _to_float(value, "latitude")
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise InvalidQueryError(
            f"latitude must be between {MIN_LATITUDE:g} and {MAX_LATITUDE:g}"
        )
    return latitude


def parse_longitude(value: Number) -> float:
    """Return ``value`` as a longitude, or raise InvalidQueryError."""
    longitude = _to_float(value, "longitude")
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise InvalidQueryError(
            f"longitude must be between {MIN_LONGITUDE:g} and {MAX_LONGITUDE:g}"
        )
    return longitude


def parse_radius(value: Number) -> float:
    """Return ``value`` as a strictly positive radius in miles."""
    radius = _to_float(value, "distance")
    if radius <= 0:
        raise InvalidQueryError("distance must be greater than 0")
    return radius


def haversine_miles(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Great-circle distance in miles between two coordinates."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    # Rounding can push ``a`` a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(min(1.0, a)))


def stores_within_radius(
    latitude: float,
    longitude: float,
    radius: float,
    candidates: Iterable[Location],
) -> list[StoreDistance]:
    """Return candidates within ``radius`` miles, closest first.

    The boundary is inclusive: a store exactly ``radius`` away is kept.
    """
    matches = []
    for location in candidates:
        distance = haversine_miles(
            latitude, longitude, location.latitude, location.longitude
        )
        if distance <= radius:
            matches.append(StoreDistance(location=location, distance_miles=distance))
    matches.sort(key=lambda match: match.distance_miles)
    return matches
