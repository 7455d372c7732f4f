"""
Country GraphQL type definitions
"""

import strawberry


@strawberry.type
class Country:
    """Country type for GraphQL API."""

    # Published as Float
    id: float
    code: str
    name: str
    emoji: str
    continent_code: str
