"""
Reference data loading for locations and products.

Reads CSV files with a header row and inserts them into the catalog
tables. Rows with a missing name or unusable coordinates are skipped.
"""

import csv
import logging
import math
from pathlib import Path
from typing import Any, Optional

from sqlalchemy import Table, insert
from sqlalchemy.engine import Engine

from catalog_api.infrastructure.catalog.tables import locations, products

logger = logging.getLogger(__name__)

LOCATION_COLUMNS = ("name", "address", "city", "state", "zip_code", "latitude", "longitude")
PRODUCT_COLUMNS = ("name", "brand", "category", "description", "image_url")


def safe_float(value: Optional[str]) -> Optional[float]:
    """Parse a float, returning None for blanks and garbage."""
    try:
        number = float((value or "").strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def read_location_rows(path: Path) -> tuple[list[dict[str, Any]], int]:
    """Parse a locations CSV. Returns (rows, skipped)."""
    rows, skipped = [], 0
    with path.open(newline="", encoding="utf-8") as handle:
        for raw in csv.DictReader(handle):
            latitude = safe_float(raw.get("latitude"))
            longitude = safe_float(raw.get("longitude"))
            name = _clean(raw.get("name"))
            zip_code = _clean(raw.get("zip_code"))
            if (
                not name
                or not zip_code
                or latitude is None
                or longitude is None
                or not -90 <= latitude <= 90
                or not -180 <= longitude <= 180
            ):
                skipped += 1
                continue
            row = {column: _clean(raw.get(column)) for column in LOCATION_COLUMNS}
            row.update(latitude=latitude, longitude=longitude)
            rows.append(row)
    return rows, skipped


def read_product_rows(path: Path) -> tuple[list[dict[str, Any]], int]:
    """Parse a products CSV. Returns (rows, skipped)."""
    rows, skipped = [], 0
    with path.open(newline="", encoding="utf-8") as handle:
        for raw in csv.DictReader(handle):
            if not _clean(raw.get("name")):
                skipped += 1
                continue
            rows.append({column: _clean(raw.get(column)) for column in PRODUCT_COLUMNS})
    return rows, skipped


def insert_rows(engine: Engine, table: Table, rows: list[dict[str, Any]]) -> int:
    """Insert ``rows`` into ``table`` in one transaction. Returns the row count."""
    if not rows:
        return 0
    with engine.begin() as conn:
        conn.execute(insert(table), rows)
    logger.info("Inserted %d rows into %s", len(rows), table.name)
    return len(rows)


def load_locations(engine: Engine, path: Path) -> tuple[int, int]:
    """Load a locations CSV. Returns (inserted, skipped)."""
    rows, skipped = read_location_rows(path)
    return insert_rows(engine, locations, rows), skipped


def load_products(engine: Engine, path: Path) -> tuple[int, int]:
    """Load a products CSV. Returns (inserted, skipped)."""
    rows, skipped = read_product_rows(path)
    return insert_rows(engine, products, rows), skipped
