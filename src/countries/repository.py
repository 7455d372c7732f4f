"""Repository helpers for country rows."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .dbmodels import Countries


async def find_all(session: AsyncSession) -> list[Countries]:
    # Autoincrement ids make id order the insertion order
    stmt = select(Countries).order_by(Countries.id)
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def find_one_by(session: AsyncSession, **criteria: Any) -> Countries | None:
    """Return the first row (lowest id) whose columns equal ``criteria``."""
    stmt = select(Countries).filter_by(**criteria).order_by(Countries.id).limit(1)
    res = await session.execute(stmt)
    return res.scalars().first()


async def find_by(session: AsyncSession, **criteria: Any) -> list[Countries]:
    stmt = select(Countries).filter_by(**criteria).order_by(Countries.id)
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def create_country(
    session: AsyncSession,
    *,
    code: str,
    name: str,
    emoji: str,
    continent_code: str,
) -> Countries:
    country = Countries()
    country.code = code
    country.name = name
    country.emoji = emoji
    country.continent_code = continent_code
    session.add(country)
    await session.flush()
    return country
