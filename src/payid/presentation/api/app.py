"""FastAPI application factories.

The PayID server runs two applications on different ports:

- the public API answers PayID protocol requests (``GET /{user}``);
- the private API exposes operational endpoints (``/status/health``).
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from payid import __version__
from payid.infrastructure.persistence.sqlalchemy.models import Base
from payid.presentation.api.dependencies import get_engine
from payid.presentation.api.exception_handlers import setup_exception_handlers
from payid.presentation.api.routers import health_router, payment_information_router
from payid_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the payid application with:
    - Console output with timestamps and module names
    - Configurable log level for payid modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("payid").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def public_lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Public API lifespan: owns the database engine."""
    logger.info("Starting PayID public API v%s...", __version__)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down PayID public API...")
    await engine.dispose()
    logger.info("Database connections closed")


@asynccontextmanager
async def private_lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Private API lifespan."""
    logger.info("Starting PayID private API v%s...", __version__)
    yield
    logger.info("Shutting down PayID private API...")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_public_app(settings: Settings | None = None) -> FastAPI:
    """Create the public API answering PayID protocol requests.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} Public API",
        description="Resolves PayIDs to payment addresses via content negotiation.",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=public_lifespan,
    )

    setup_exception_handlers(app)

    # Catch-all route: must be the last one registered
    app.include_router(payment_information_router, tags=["PayID"])

    return app


def create_private_app(settings: Settings | None = None) -> FastAPI:
    """Create the private API for operational endpoints.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} Private API",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=private_lifespan,
    )

    setup_exception_handlers(app)
    app.include_router(health_router, prefix="/status", tags=["Health"])

    return app
