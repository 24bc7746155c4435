"""
Application entry point.

Creates the FastAPI application and wires together:
- Resource routers (review, location, product) around their repositories
- Error handlers (centralized fault responder)
- Security headers middleware and the rate limit dependency
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded

from catalog_api.core.config import Settings, settings
from catalog_api.infrastructure.database import build_engine, create_schema
from catalog_api.interfaces.catalog.dependencies import (
    CatalogRepositories,
    build_sql_repositories,
    include_catalog_routers,
)
from catalog_api.interfaces.health import router as health_router
from catalog_api.shared.errors.handlers import register_error_handlers
from catalog_api.shared.logging import configure_logging
from catalog_api.shared.security.headers import SecurityHeadersMiddleware
from catalog_api.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup when asked to; release the engine on shutdown."""
    engine = app.state.engine
    if engine is not None and app.state.settings.create_schema:
        create_schema(engine)

    yield

    if engine is not None:
        engine.dispose()


def create_app(
    app_settings: Optional[Settings] = None,
    repositories: Optional[CatalogRepositories] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.
        repositories: Data-access collaborators. When omitted, SQLAlchemy
            repositories are built on the configured database.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.state.settings = app_settings

    engine = None
    if repositories is None:
        engine = build_engine(app_settings.get_database_url())
        repositories = build_sql_repositories(engine)
    app.state.engine = engine

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        app_settings.rate_limit_default, enabled=app_settings.rate_limit_enabled
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    include_catalog_routers(app, repositories)

    logger.info("%s %s configured", app_settings.project_name, app_settings.version)
    return app


app = create_app()
