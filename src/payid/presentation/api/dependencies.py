"""FastAPI dependency injection for the PayID APIs.

Provides dependencies for:
- Database engine and sessions
- The address repository
- The resolution query
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from payid.application.queries import ResolvePaymentInformationQuery
from payid.domain.payment.repositories import AddressRepository
from payid.infrastructure.persistence.sqlalchemy.repositories import (
    AddressRepositorySQLAlchemy,
)
from payid_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repositories & Queries
# -----------------------------------------------------------------------------


def get_address_repository(session: DBSession) -> AddressRepository:
    """Get the address repository bound to the request session."""
    return AddressRepositorySQLAlchemy(session)


def get_resolve_query(
    address_repository: AddressRepository = Depends(get_address_repository),
) -> ResolvePaymentInformationQuery:
    """Get the PayID resolution query."""
    return ResolvePaymentInformationQuery(address_repository)


# Type alias for injected resolution query
ResolveQuery = Annotated[ResolvePaymentInformationQuery, Depends(get_resolve_query)]
