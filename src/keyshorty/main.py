"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from keyshorty import __version__
from keyshorty.config import settings
from keyshorty.db.engine import create_db_engine, create_session_factory, create_tables
from keyshorty.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    engine = create_db_engine(settings.database_url)

    # Tables are created on startup when absent (no migrations)
    await create_tables(engine)

    app.state.db_engine = engine
    app.state.db_session_factory = create_session_factory(engine)

    logger.info("KeyShorty API started (db=%s)", "sqlite" if settings.is_sqlite else "external")
    yield

    await engine.dispose()
    logger.info("KeyShorty API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="KeyShorty API",
        version=__version__,
        description="Catalogue of keyboard shortcuts per application.",
        lifespan=lifespan,
    )

    # CORS middleware for the browser frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from keyshorty.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from keyshorty.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from keyshorty.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
