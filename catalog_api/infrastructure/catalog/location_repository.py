"""
Adapter: Store location repository.

Implements LocationRepository port. Reads the ``locations``
reference table; it is never written by the service.
"""

from typing import Any

from sqlalchemy import text as sql_text

from catalog_api.domain.catalog.entities import Location
from catalog_api.domain.catalog.outcome import NotFound, Ok, Outcome
from catalog_api.domain.catalog.ports import LocationRepository
from catalog_api.infrastructure.database import SqlRepository

_SELECT_LOCATIONS = """
    SELECT id, name, address, city, state, zip_code, latitude, longitude
    FROM locations
"""


def _row_to_location(row: Any) -> Location:
    return Location(
        id=row["id"],
        name=row["name"],
        address=row["address"],
        city=row["city"],
        state=row["state"],
        zip_code=row["zip_code"],
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
    )


class SqlLocationRepository(SqlRepository, LocationRepository):
    """Store locations from the ``locations`` table."""

    async def list_all(self) -> Outcome[list[Location]]:
        return await self._run(self._list_all)

    async def get_by_zip_code(self, zip_code: str) -> Outcome[Location]:
        return await self._run(self._get_by_zip_code, zip_code)

    async def get_by_coordinates(
        self, latitude: float, longitude: float
    ) -> Outcome[Location]:
        return await self._run(self._get_by_coordinates, latitude, longitude)

    def _list_all(self) -> Outcome[list[Location]]:
        with self._engine.connect() as conn:
            rows = conn.execute(sql_text(f"{_SELECT_LOCATIONS} ORDER BY id")).mappings().all()
        return Ok([_row_to_location(row) for row in rows])

    def _get_by_zip_code(self, zip_code: str) -> Outcome[Location]:
        with self._engine.connect() as conn:
            row = conn.execute(
                sql_text(f"{_SELECT_LOCATIONS} WHERE zip_code = :zip_code ORDER BY id"),
                {"zip_code": zip_code},
            ).mappings().first()
        if row is None:
            return NotFound(f"No location with zip code {zip_code}")
        return Ok(_row_to_location(row))

    def _get_by_coordinates(self, latitude: float, longitude: float) -> Outcome[Location]:
        with self._engine.connect() as conn:
            row = conn.execute(
                sql_text(
                    f"{_SELECT_LOCATIONS} "
                    "WHERE latitude = :latitude AND longitude = :longitude ORDER BY id"
                ),
                {"latitude": latitude, "longitude": longitude},
            ).mappings().first()
        if row is None:
            return NotFound(f"No location at ({latitude}, {longitude})")
        return Ok(_row_to_location(row))
