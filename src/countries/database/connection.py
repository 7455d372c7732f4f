"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..dbmodels import target_metadata
from ..logging import get_logger

logger = get_logger(__name__)

# Global shared connection pool
_async_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None
_initialized = False
_init_lock = threading.Lock()  # Protect initialization from race conditions

# Sync driver prefixes and their async counterparts
ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
}


def get_database_url() -> str:
    """Get database URL, checking environment variables first for test compatibility."""
    return os.getenv("COUNTRIES_DATABASE_URL") or settings.database_url


def to_async_url(database_url: str) -> str:
    """Map a sync database URL onto the matching async driver.

    URLs that already name a driver (``sqlite+aiosqlite://``) are returned unchanged.
    """
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if database_url.startswith(prefix):
            return async_prefix + database_url[len(prefix) :]
    return database_url


def reset_database():
    """Reset database connections (for tests)."""
    global _async_engine, _async_session_local, _initialized
    _async_engine = None
    _async_session_local = None
    _initialized = False


def init_database(database_url: str | None = None, force_reinit: bool = False):
    """Initialize the shared async engine and session factory.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously. No
    connection is opened here; see `sync_schema` and `test_database_connection`.
    """
    global _async_engine, _async_session_local, _initialized

    # Fast path: already initialized, no lock needed
    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        # Double-check after acquiring lock (another thread may have initialized)
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()
        async_db_url = to_async_url(db_url)

        engine_kwargs = {"echo": settings.sql_echo}
        # SQLite file databases use SQLAlchemy's default pool sizing
        if make_url(async_db_url).get_backend_name() != "sqlite":
            engine_kwargs["pool_size"] = settings.database_pool_size
            engine_kwargs["max_overflow"] = settings.database_max_overflow

        _async_engine = create_async_engine(async_db_url, **engine_kwargs)
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=db_url)


def get_async_engine() -> AsyncEngine:
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    if _async_engine is None:
        raise RuntimeError("Database not initialized")
    return _async_engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session factory."""
    if _async_session_local is None:
        init_database()
    if _async_session_local is None:
        raise RuntimeError("Database not initialized")
    return _async_session_local


async def sync_schema() -> None:
    """Create any missing tables from the declared models."""
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(target_metadata.create_all)
    logger.info("Database schema synchronized", tables=sorted(target_metadata.tables))


async def dispose_database() -> None:
    """Close pooled connections and forget the shared engine."""
    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Database connections disposed")
    reset_database()


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "unable to open database file" in error_str:
            return False, (
                f"Cannot open database file: {error_str}\n"
                f"Check that the directory for '{_async_engine.url.database}' exists "
                f"and is writable."
            )
        elif "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


@asynccontextmanager
async def get_async_session(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session (async), committing on success.

    Args:
        session_factory: Factory to open the session from; the shared one when omitted
    """
    factory = session_factory or get_session_factory()

    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
