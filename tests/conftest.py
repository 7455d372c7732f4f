"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[tuple[str, Path], None, None]:
    """Return the URL and path of a throwaway SQLite database file."""
    db_path = tmp_path / "countries-test.sqlite"
    yield f"sqlite:///{db_path}", db_path


@pytest.fixture(scope="function")
def reset_shared_db_connections(test_database: tuple[str, Path]) -> Generator[None, None, None]:
    """Reset and configure shared database connections for the test database."""
    from countries.database.connection import init_database, reset_database

    url, _ = test_database

    reset_database()
    init_database(url, force_reinit=True)

    yield

    reset_database()


@pytest_asyncio.fixture(scope="function")
async def synced_database(reset_shared_db_connections: None) -> AsyncGenerator[None, None]:
    """Create the schema in the test database and dispose of the engine afterwards."""
    _ = reset_shared_db_connections

    from countries.database.connection import dispose_database, sync_schema

    await sync_schema()
    yield
    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def db_session(synced_database: None) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session for testing."""
    _ = synced_database

    from countries.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
