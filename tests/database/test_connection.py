"""
Tests for database connection management
"""

from pathlib import Path

import pytest
from sqlalchemy import inspect, text

from countries.database import connection
from countries.dbmodels import Countries


class TestToAsyncUrl:
    """Tests for mapping sync URLs onto async drivers."""

    def test_sqlite_file_url(self):
        assert (
            connection.to_async_url("sqlite:///checkpoint.sqlite")
            == "sqlite+aiosqlite:///checkpoint.sqlite"
        )

    def test_postgres_url(self):
        assert (
            connection.to_async_url("postgresql://user:pw@localhost:5432/countries")
            == "postgresql+asyncpg://user:pw@localhost:5432/countries"
        )

    def test_explicit_driver_is_kept(self):
        url = "sqlite+aiosqlite:////tmp/countries.sqlite"
        assert connection.to_async_url(url) == url


def test_get_database_url_prefers_environment(monkeypatch):
    monkeypatch.setenv("COUNTRIES_DATABASE_URL", "sqlite:///from-env.sqlite")
    assert connection.get_database_url() == "sqlite:///from-env.sqlite"


def test_get_database_url_falls_back_to_settings(monkeypatch):
    monkeypatch.delenv("COUNTRIES_DATABASE_URL", raising=False)
    assert connection.get_database_url() == connection.settings.database_url


def test_init_database_is_idempotent(reset_shared_db_connections):
    engine = connection.get_async_engine()
    connection.init_database()
    assert connection.get_async_engine() is engine


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_sync_schema_creates_countries_table(synced_database, test_database):
    _, db_path = test_database
    assert db_path.exists()

    engine = connection.get_async_engine()
    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        columns = await conn.run_sync(
            lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns("countries")]
        )

    assert Countries.__tablename__ in tables
    assert columns == ["id", "code", "name", "emoji", "continent_code"]


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_database_connection_ok(synced_database):
    ok, message = await connection.test_database_connection()
    assert ok is True
    assert message is None


@pytest.mark.asyncio
async def test_database_connection_without_engine():
    connection.reset_database()
    ok, message = await connection.test_database_connection()
    assert ok is False
    assert message == "Database engine not initialized"


@pytest.mark.asyncio
async def test_database_connection_missing_directory(tmp_path: Path):
    missing = tmp_path / "does-not-exist" / "countries.sqlite"
    connection.reset_database()
    connection.init_database(f"sqlite:///{missing}", force_reinit=True)
    try:
        ok, message = await connection.test_database_connection()
    finally:
        await connection.dispose_database()

    assert ok is False
    assert message is not None
    assert "Cannot open database file" in message
    assert str(missing) in message


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_get_async_session_rolls_back_on_error(synced_database):
    with pytest.raises(RuntimeError):
        async with connection.get_async_session() as session:
            session.add(Countries(code="FR", name="France", emoji="🇫🇷", continent_code="EU"))
            await session.flush()
            raise RuntimeError("boom")

    async with connection.get_async_session() as session:
        count = (await session.execute(text("SELECT COUNT(*) FROM countries"))).scalar_one()
    assert count == 0


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_get_async_session_uses_given_factory(synced_database):
    factory = connection.get_session_factory()
    async with connection.get_async_session(factory) as session:
        assert session.bind is connection.get_async_engine()


@pytest.mark.asyncio
async def test_dispose_database_resets_state(reset_shared_db_connections):
    await connection.dispose_database()
    ok, _ = await connection.test_database_connection()
    assert ok is False
