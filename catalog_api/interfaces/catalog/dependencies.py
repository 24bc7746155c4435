"""
Composition root for the catalog bounded context.

Routers take their repositories as plain arguments; this module
builds the default SQLAlchemy-backed set and mounts the routers.
"""

from dataclasses import dataclass

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from catalog_api.domain.catalog.ports import (
    LocationRepository,
    ProductRepository,
    ReviewRepository,
)
from catalog_api.infrastructure.catalog.location_repository import (
    SqlLocationRepository,
)
from catalog_api.infrastructure.catalog.product_repository import (
    SqlProductRepository,
)
from catalog_api.infrastructure.catalog.review_repository import SqlReviewRepository
from catalog_api.interfaces.catalog.location_router import build_location_router
from catalog_api.interfaces.catalog.product_router import build_product_router
from catalog_api.interfaces.catalog.review_router import build_review_router


@dataclass(frozen=True)
class CatalogRepositories:
    """The data-access collaborators of the catalog routers."""

    reviews: ReviewRepository
    locations: LocationRepository
    products: ProductRepository


def build_sql_repositories(engine: Engine) -> CatalogRepositories:
    """Build repositories that share one SQLAlchemy engine."""
    return CatalogRepositories(
        reviews=SqlReviewRepository(engine),
        locations=SqlLocationRepository(engine),
        products=SqlProductRepository(engine),
    )


def include_catalog_routers(app: FastAPI, repositories: CatalogRepositories) -> None:
    """Mount the review, location and product routers on ``app``."""
    app.include_router(build_review_router(repositories.reviews))
    app.include_router(build_location_router(repositories.locations))
    app.include_router(build_product_router(repositories.products))
