"""
Adapter: Review repository.

Implements ReviewRepository port on top of a SQLAlchemy engine.
A missing review is reported as NotFound, never raised.
"""

from dataclasses import asdict
from typing import Any

from sqlalchemy import insert
from sqlalchemy import text as sql_text

from catalog_api.domain.catalog.entities import Review, ReviewDraft
from catalog_api.domain.catalog.outcome import NotFound, Ok, Outcome
from catalog_api.domain.catalog.ports import ReviewRepository
from catalog_api.infrastructure.catalog.tables import reviews
from catalog_api.infrastructure.database import SqlRepository

_SELECT_REVIEWS = "SELECT id, product_id, reviewer, rating, content FROM reviews"


def _row_to_review(row: Any) -> Review:
    return Review(
        id=row["id"],
        product_id=row["product_id"],
        reviewer=row["reviewer"],
        rating=row["rating"],
        content=row["content"],
    )


def _missing(review_id: int) -> NotFound:
    return NotFound(f"Review {review_id} does not exist")


class SqlReviewRepository(SqlRepository, ReviewRepository):
    """Review storage in the ``reviews`` table."""

    async def list_all(self) -> Outcome[list[Review]]:
        return await self._run(self._list_all)

    async def get(self, review_id: int) -> Outcome[Review]:
        return await self._run(self._get, review_id)

    async def add(self, draft: ReviewDraft) -> Outcome[Review]:
        return await self._run(self._add, draft)

    async def update(self, review_id: int, draft: ReviewDraft) -> Outcome[Review]:
        return await self._run(self._update, review_id, draft)

    async def delete(self, review_id: int) -> Outcome[Review]:
        return await self._run(self._delete, review_id)

    def _list_all(self) -> Outcome[list[Review]]:
        with self._engine.connect() as conn:
            rows = conn.execute(sql_text(f"{_SELECT_REVIEWS} ORDER BY id")).mappings().all()
        return Ok([_row_to_review(row) for row in rows])

    def _get(self, review_id: int) -> Outcome[Review]:
        with self._engine.connect() as conn:
            row = conn.execute(
                sql_text(f"{_SELECT_REVIEWS} WHERE id = :id"), {"id": review_id}
            ).mappings().first()
        if row is None:
            return _missing(review_id)
        return Ok(_row_to_review(row))

    def _add(self, draft: ReviewDraft) -> Outcome[Review]:
        values = asdict(draft)
        with self._engine.begin() as conn:
            result = conn.execute(insert(reviews).values(**values))
            review_id = result.inserted_primary_key[0]
        return Ok(Review(id=review_id, **values))

    def _update(self, review_id: int, draft: ReviewDraft) -> Outcome[Review]:
        values = asdict(draft)
        with self._engine.begin() as conn:
            result = conn.execute(
                sql_text(
                    """
                    UPDATE reviews
                    SET product_id = :product_id,
                        reviewer = :reviewer,
                        rating = :rating,
                        content = :content
                    WHERE id = :id
                    """
                ),
                {**values, "id": review_id},
            )
        if result.rowcount == 0:
            return _missing(review_id)
        return Ok(Review(id=review_id, **values))

    def _delete(self, review_id: int) -> Outcome[Review]:
        with self._engine.begin() as conn:
            row = conn.execute(
                sql_text(f"{_SELECT_REVIEWS} WHERE id = :id"), {"id": review_id}
            ).mappings().first()
            if row is None:
                return _missing(review_id)
            conn.execute(sql_text("DELETE FROM reviews WHERE id = :id"), {"id": review_id})
        return Ok(_row_to_review(row))
