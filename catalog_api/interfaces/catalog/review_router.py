"""
FastAPI router for reviews.

Every route awaits one repository call and hands the outcome to the
shared classifier. Update reports a missing review as a
server error (500) while get and delete report it as 404.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from catalog_api.domain.catalog.entities import Review
from catalog_api.domain.catalog.ports import ReviewRepository
from catalog_api.interfaces.catalog.catch_all import READ_METHODS, add_catch_all
from catalog_api.interfaces.catalog.schemas import (
    ErrorResponse,
    ReviewPayload,
    ReviewResponse,
    UpdateReviewResponse,
)
from catalog_api.shared.errors.classifier import EmptyPolicy, ErrorClassifier
from catalog_api.shared.errors.guard import GuardedRoute

UPDATE_FAILED = "Server Error - Could not update"


def _present(review: Review) -> ReviewResponse:
    return ReviewResponse.model_validate(review)


def _present_many(reviews: list[Review]) -> list[ReviewResponse]:
    return [_present(review) for review in reviews]


def build_review_router(repository: ReviewRepository) -> APIRouter:
    """Build the /review router around ``repository``."""
    router = APIRouter(prefix="/review", tags=["review"], route_class=GuardedRoute)
    classifier = ErrorClassifier("Review")

    @router.api_route(
        "",
        methods=READ_METHODS,
        response_model=list[ReviewResponse],
        responses={500: {"model": ErrorResponse}},
        summary="List reviews",
    )
    async def list_reviews() -> JSONResponse:
        """Return all reviews. An empty store yields 200 with []."""
        outcome = await repository.list_all()
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_OK, present=_present_many
        )

    @router.api_route(
        "/{review_id}",
        methods=READ_METHODS,
        response_model=ReviewResponse,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Get one review",
    )
    async def get_review(review_id: int) -> JSONResponse:
        outcome = await repository.get(review_id)
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present
        )

    @router.post(
        "",
        status_code=201,
        response_model=ReviewResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Create a review",
    )
    async def create_review(payload: ReviewPayload) -> JSONResponse:
        outcome = await repository.add(payload.to_draft())
        return classifier.respond(
            outcome,
            success_status=201,
            empty_policy=EmptyPolicy.EMPTY_IS_ERROR,
            present=_present,
        )

    @router.put(
        "/{review_id}",
        response_model=UpdateReviewResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Replace a review",
    )
    async def update_review(review_id: int, payload: ReviewPayload) -> JSONResponse:
        outcome = await repository.update(review_id, payload.to_draft())
        return classifier.respond(
            outcome,
            empty_policy=EmptyPolicy.EMPTY_IS_ERROR,
            not_found_is_failure=True,
            server_error=UPDATE_FAILED,
            present=_present,
            wrap="result",
        )

    @router.delete(
        "/{review_id}",
        response_model=ReviewResponse,
        responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        summary="Delete a review",
    )
    async def delete_review(review_id: int) -> JSONResponse:
        outcome = await repository.delete(review_id)
        return classifier.respond(
            outcome, empty_policy=EmptyPolicy.EMPTY_IS_ERROR, present=_present
        )

    add_catch_all(router)
    return router
