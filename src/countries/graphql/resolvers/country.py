from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ... import repository
from ...database.connection import get_async_session
from ...dbmodels import Countries
from ...logging import get_logger

if TYPE_CHECKING:
    from ..mutations.root import CountryInput
    from ..types.country import Country

logger = get_logger(__name__)


def get_session_factory_from_info(
    info: strawberry.Info,
) -> async_sessionmaker[AsyncSession] | None:
    """Return the storage handle placed in the GraphQL context, if any."""
    context = info.context
    if isinstance(context, dict):
        return context.get("session_factory")
    return getattr(context, "session_factory", None)


def to_country(row: Countries) -> Country:
    """Convert a SQLAlchemy row to the GraphQL type."""
    from ..types.country import Country as CountryType

    return CountryType(
        id=float(row.id),
        code=row.code,
        name=row.name,
        emoji=row.emoji,
        continent_code=row.continent_code,
    )


# Query resolvers
async def resolve_countries(info: strawberry.Info) -> list[Country]:
    """Resolve every country, in insertion order."""
    logger.debug("Fetching countries")
    async with get_async_session(get_session_factory_from_info(info)) as session:
        rows = await repository.find_all(session)

    logger.info("Fetched countries", count=len(rows))
    return [to_country(row) for row in rows]


async def resolve_country_name_by_code(info: strawberry.Info, code: str) -> str | None:
    """
    Resolve the name of the country with the given code.

    Codes are not unique; the earliest stored match wins. Returns None when
    nothing matches.
    """
    async with get_async_session(get_session_factory_from_info(info)) as session:
        country = await repository.find_one_by(session, code=code)

    if country is None:
        logger.info("Country not found", code=code)
        return None

    return country.name


async def resolve_countries_by_continent(
    info: strawberry.Info, continent_code: str
) -> list[Country]:
    """Resolve countries whose continent code equals the argument exactly."""
    async with get_async_session(get_session_factory_from_info(info)) as session:
        rows = await repository.find_by(session, continent_code=continent_code)

    logger.info("Fetched countries by continent", continent_code=continent_code, count=len(rows))
    return [to_country(row) for row in rows]


# Mutation resolvers
async def add_country(info: strawberry.Info, infos: CountryInput) -> Country:
    """Persist a new country and return it with its generated id."""
    async with get_async_session(get_session_factory_from_info(info)) as session:
        country = await repository.create_country(
            session,
            code=infos.code,
            name=infos.name,
            emoji=infos.emoji,
            continent_code=infos.continent_code,
        )

    logger.info("Country created", country_id=country.id, code=country.code)
    return to_country(country)
