"""
FastAPI router for products (read-only).
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.domain.catalog.entities import Product
from catalog_api.domain.catalog.ports import ProductRepository
from catalog_api.interfaces.catalog.catch_all import READ_METHODS, add_catch_all
from catalog_api.interfaces.catalog.schemas import ErrorResponse, ProductResponse
from catalog_api.shared.errors.classifier import EmptyPolicy, ErrorClassifier
from catalog_api.shared.errors.guard import GuardedRoute


def _present_many(products: list[Product]) -> list[ProductResponse]:
    return [ProductResponse.model_validate(product) for product in products]


def build_product_router(repository: ProductRepository) -> APIRouter:
    """Build the /product router around ``repository``."""
    router = APIRouter(prefix="/product", tags=["product"], route_class=GuardedRoute)
    classifier = ErrorClassifier("Product")

    @router.api_route(
        "",
        methods=READ_METHODS,
        response_model=list[ProductResponse],
        responses={500: {"model": ErrorResponse}},
        summary="List products",
    )
    async def list_products() -> JSONResponse:
        """Return the catalog. An empty catalog is a backend miss (500)."""
        outcome = await repository.list_all()
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present_many
        )

    @router.api_route(
        "/{product_id}",
        methods=READ_METHODS,
        response_model=ProductResponse,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Get one product",
    )
    async def get_product(product_id: int) -> JSONResponse:
        outcome = await repository.get(product_id)
        return classifier.respond(
            outcome,
            empty_policy=EmptyPolicy.EMPTY_IS_ERROR,
            present=ProductResponse.model_validate,
        )

    add_catch_all(router)
    return router
