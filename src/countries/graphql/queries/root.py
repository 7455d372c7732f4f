"""
Root GraphQL query definitions
"""

import strawberry

from ..types.country import Country


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def get_countries(self, info: strawberry.Info) -> list[Country]:
        """Get every stored country."""
        from ..resolvers.country import resolve_countries

        return await resolve_countries(info)

    @strawberry.field
    async def get_country_name_by_code(self, info: strawberry.Info, code: str) -> str | None:
        """Get the name of the country with the given code."""
        from ..resolvers.country import resolve_country_name_by_code

        return await resolve_country_name_by_code(info, code)

    @strawberry.field
    async def get_countries_by_continent(
        self, info: strawberry.Info, continent_code: str
    ) -> list[Country]:
        """Get the countries of a continent."""
        from ..resolvers.country import resolve_countries_by_continent

        return await resolve_countries_by_continent(info, continent_code)
