#!/usr/bin/env python3
"""
Main CLI entry point for the Countries API.
"""

import asyncio
import os
import sys

import click
import uvicorn

from countries import __version__
from countries.config import settings
from countries.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="countries")
def cli() -> None:
    """Countries CLI - manage the server, database and country records."""
    pass


@cli.command()
@click.option(
    "--host",
    default=lambda: settings.api_host,
    help="Host to bind to (default: COUNTRIES_API_HOST, else 0.0.0.0)",
)
@click.option(
    "--port",
    default=lambda: settings.api_port,
    type=int,
    help="Port to bind to (default: COUNTRIES_API_PORT, else 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Countries API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Countries API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app reads these at import time when started from an import string
    if log_level == "debug":
        os.environ["COUNTRIES_DEBUG"] = "true"
        os.environ["COUNTRIES_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("COUNTRIES_DEBUG", "false")
        os.environ.setdefault("COUNTRIES_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "countries.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from countries.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("schema")
def print_schema_command() -> None:
    """Print the GraphQL schema as SDL."""
    from countries.graphql.schema import print_schema

    click.echo(print_schema())


@cli.group()
def db() -> None:
    """Manage the database."""
    pass


@db.command("init")
def db_init() -> None:
    """Create the countries table if it does not exist."""
    from countries.database.connection import dispose_database, init_database, sync_schema

    configure_logging()

    async def do_init():
        try:
            init_database()
            await sync_schema()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Database initialization failed", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database schema synchronized")


@db.command("check")
def db_check() -> None:
    """Check that the database is reachable."""
    from countries.database import connection

    configure_logging()

    async def do_check() -> tuple[bool, str | None]:
        try:
            connection.init_database()
            return await connection.test_database_connection()
        finally:
            await connection.dispose_database()

    ok, message = asyncio.run(do_check())
    if not ok:
        logger.error("Database check failed", error=message)
        click.echo(f"✗ {message}", err=True)
        sys.exit(1)

    click.echo("✓ Database connection successful")


@cli.group()
def country() -> None:
    """Manage country records."""
    pass


@country.command("add")
@click.option("--code", required=True, help="Country code, e.g. FR")
@click.option("--name", required=True, help="Display name")
@click.option("--emoji", required=True, help="Flag emoji")
@click.option("--continent", "continent_code", required=True, help="Continent code, e.g. EU")
def add_country(code: str, name: str, emoji: str, continent_code: str) -> None:
    """Register a new country."""
    from countries import repository
    from countries.database.connection import (
        dispose_database,
        get_async_session,
        init_database,
        sync_schema,
    )

    configure_logging()

    async def do_add():
        try:
            init_database()
            await sync_schema()
            async with get_async_session() as db:
                return await repository.create_country(
                    db, code=code, name=name, emoji=emoji, continent_code=continent_code
                )
        finally:
            await dispose_database()

    try:
        created = asyncio.run(do_add())
    except Exception as e:
        logger.error("Failed to add country", error=str(e))
        click.echo(f"✗ Error adding country: {e}", err=True)
        sys.exit(1)

    logger.info("Country created", country_id=created.id, code=created.code)
    click.echo(f"✓ Country created: {created.id}")
    click.echo(f"  {created.emoji} {created.name} ({created.code}, {created.continent_code})")


@country.command("list")
@click.option("--continent", "continent_code", default=None, help="Only list this continent")
def list_countries(continent_code: str | None) -> None:
    """List stored countries."""
    from countries import repository
    from countries.database.connection import (
        dispose_database,
        get_async_session,
        init_database,
        sync_schema,
    )

    configure_logging()

    async def do_list():
        try:
            init_database()
            await sync_schema()
            async with get_async_session() as db:
                if continent_code is None:
                    return await repository.find_all(db)
                return await repository.find_by(db, continent_code=continent_code)
        finally:
            await dispose_database()

    try:
        rows = asyncio.run(do_list())
    except Exception as e:
        logger.error("Failed to list countries", error=str(e))
        click.echo(f"✗ Error listing countries: {e}", err=True)
        sys.exit(1)

    if not rows:
        click.echo("No countries found")
        return

    click.echo(f"{'ID':<6} {'Code':<6} {'Continent':<10} Name")
    click.echo("-" * 40)
    for row in rows:
        click.echo(f"{row.id:<6} {row.code:<6} {row.continent_code:<10} {row.emoji} {row.name}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
