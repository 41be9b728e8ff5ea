"""BookBrainz Entity API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly from router-building functions (no auto-discovery)
    - Global error handlers map BookBrainzError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app() factory: the route table is a value built once by the server
      setup, tests build the same app with their own database
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes.author import build_author_router
from app.api.routes.health import build_health_router
from app.config import Settings, get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("BookBrainz API started")
    yield
    await close_db()
    logger.info("BookBrainz API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: middleware, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(title="BookBrainz API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(build_health_router(), prefix=settings.api_prefix)
    app.include_router(build_author_router(), prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()
