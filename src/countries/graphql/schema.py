"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..database.connection import get_session_factory
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation and an introspection query so
    unresolved type references fail the server start instead of individual
    requests.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())

        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def print_schema() -> str:
    """Render the schema as SDL."""
    return schema.as_str()


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers.

    Never raises: when the storage handle cannot be built, the context carries
    None and the failure resurfaces inside the resolvers that need storage.
    """
    try:
        session_factory = get_session_factory()
    except Exception as e:
        logger.warning("Storage handle unavailable for request", error=str(e))
        session_factory = None

    return {
        "request": request,
        "session_factory": session_factory,
    }


# Create the GraphQL router for FastAPI integration
def create_graphql_router(path: str | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        path: Route to serve GraphQL on (defaults to ``settings.graphql_path``)
    """
    return GraphQLRouter(
        schema,
        path=path if path is not None else settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
