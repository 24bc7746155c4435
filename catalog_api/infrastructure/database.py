"""
SQLAlchemy engine construction and the shared repository base.

Repository methods do blocking database work on Starlette's thread
pool, so each data-access call is a suspension point for the event
loop. Driver errors become Failure outcomes; they never propagate.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from starlette.concurrency import run_in_threadpool

from catalog_api.domain.catalog.outcome import Failure, Outcome
from catalog_api.infrastructure.catalog.tables import metadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for ``database_url``.

    SQLite connections are shared across the thread pool; an in-memory
    database additionally keeps a single connection alive so that every
    thread sees the same data.
    """
    if database_url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/").endswith(":"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)
    return create_engine(database_url, pool_pre_ping=True)


def create_schema(engine: Engine) -> None:
    """Create every catalog table that does not exist yet."""
    metadata.create_all(engine)
    logger.info("Catalog schema ready on %s", engine.url.render_as_string(hide_password=True))


class SqlRepository:
    """Base class for repositories backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    async def _run(
        self, operation: Callable[..., Outcome[T]], *args: Any
    ) -> Outcome[T]:
        """Run a blocking ``operation`` off the event loop."""
        try:
            return await run_in_threadpool(operation, *args)
        except SQLAlchemyError as exc:
            logger.error(
                "%s.%s failed: %s",
                type(self).__name__,
                operation.__name__,
                exc,
            )
            return Failure(str(exc))
