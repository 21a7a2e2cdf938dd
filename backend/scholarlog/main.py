"""Scholarlog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ScholarlogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The store handle and services are built once in the lifespan and placed on
      app.state; handlers reach them only through Depends(get_services)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build an app and inject their own services
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scholarlog.api.error_handlers import register_error_handlers
from scholarlog.api.routes import health, resources, users
from scholarlog.config import Settings, get_settings
from scholarlog.core.domain_types import ResourceKind
from scholarlog.infrastructure.database import DatabaseSessionManager
from scholarlog.infrastructure.observability import (
    REQUEST_ID_HEADER, RequestLoggingMiddleware, setup_logging,
)
from scholarlog.services.container import build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_all()
    app.state.services = build_services(db_manager, bcrypt_rounds=settings.bcrypt_rounds)
    logger.info("Scholarlog API started")
    yield
    logger.info("Scholarlog API shutting down")
    await db_manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Scholarlog API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Routes: explicit registration, one router per resource kind
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(resources.build_router(ResourceKind.COURSE))
    app.include_router(resources.build_router(ResourceKind.EVENT))
    app.include_router(resources.build_router(ResourceKind.JOURNAL))
    app.include_router(resources.build_router(ResourceKind.CONFERENCE))
    app.include_router(resources.build_router(ResourceKind.BOOK))
    app.include_router(resources.build_router(ResourceKind.PATENT))

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "scholarlog.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug,
    )
