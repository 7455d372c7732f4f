"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.country import Country


@strawberry.input
class CountryInput:
    """Input for registering a new country."""

    code: str
    name: str
    emoji: str
    continent_code: str


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addCountry")
    async def add_country(self, info: strawberry.Info, infos: CountryInput) -> Country:
        """Register a new country."""
        from ..resolvers.country import add_country

        return await add_country(info, infos)
