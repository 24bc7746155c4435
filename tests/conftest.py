"""
Shared fixtures for the catalog test suite.

HTTP tests run against an in-memory SQLite database through the real
SQLAlchemy repositories, or against AsyncMock repositories when a
test needs to control or observe the data layer directly.
"""

import math
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from catalog_api.core.config import Settings
from catalog_api.domain.catalog.entities import Location
from catalog_api.domain.catalog.geo import EARTH_RADIUS_MILES
from catalog_api.domain.catalog.ports import (
    LocationRepository,
    ProductRepository,
    ReviewRepository,
)
from catalog_api.infrastructure.catalog.tables import locations, products
from catalog_api.infrastructure.database import build_engine, create_schema
from catalog_api.interfaces.catalog.dependencies import (
    CatalogRepositories,
    build_sql_repositories,
)
from catalog_api.main import create_app

ORIGIN_LAT = 40.0
ORIGIN_LNG = -75.0


def miles_north(miles: float) -> float:
    """Latitude that lies ``miles`` due north of the test origin."""
    return ORIGIN_LAT + miles / (EARTH_RADIUS_MILES * math.pi / 180)


def make_location(
    location_id: int, miles: float, zip_code: str = "19000", name: str = ""
) -> Location:
    return Location(
        id=location_id,
        name=name or f"Store {location_id}",
        zip_code=zip_code,
        latitude=miles_north(miles),
        longitude=ORIGIN_LNG,
    )


def make_settings() -> Settings:
    return Settings(rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def engine():
    """A fresh in-memory database with the catalog schema."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_engine(engine):
    """Database with three stores north of the origin and two products."""
    with engine.begin() as conn:
        conn.execute(
            insert(locations),
            [
                {
                    "name": "Origin Market",
                    "zip_code": "19000",
                    "latitude": ORIGIN_LAT,
                    "longitude": ORIGIN_LNG,
                },
                {
                    "name": "Fifteen Mile Market",
                    "zip_code": "19015",
                    "latitude": miles_north(15),
                    "longitude": ORIGIN_LNG,
                },
                {
                    "name": "Five Mile Market",
                    "zip_code": "19005",
                    "latitude": miles_north(5),
                    "longitude": ORIGIN_LNG,
                },
            ],
        )
        conn.execute(
            insert(products),
            [
                {"name": "Fuji Apples", "brand": "Fuji Farms", "category": "Fruits"},
                {"name": "Whole Milk", "brand": "Dairy Co", "category": "Dairy"},
            ],
        )
    return engine


@pytest.fixture
def client(engine) -> TestClient:
    """Client backed by an empty database."""
    return TestClient(create_app(make_settings(), build_sql_repositories(engine)))


@pytest.fixture
def seeded_client(seeded_engine) -> TestClient:
    """Client backed by the seeded database."""
    return TestClient(
        create_app(make_settings(), build_sql_repositories(seeded_engine))
    )


@pytest.fixture
def mock_repositories() -> CatalogRepositories:
    """AsyncMock repositories; configure return values per test."""
    return CatalogRepositories(
        reviews=AsyncMock(spec=ReviewRepository),
        locations=AsyncMock(spec=LocationRepository),
        products=AsyncMock(spec=ProductRepository),
    )


@pytest.fixture
def mock_client(mock_repositories) -> TestClient:
    return TestClient(create_app(make_settings(), mock_repositories))
