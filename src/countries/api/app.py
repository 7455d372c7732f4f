"""
Main FastAPI application for the Countries API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import dispose_database, init_database, sync_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


class DatabaseInitializationError(RuntimeError):
    """Raised at startup when the database is unusable and fail-fast is enabled."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Countries API...")
    try:
        init_database()
        await sync_schema()
        logger.info("Data source has been initialized")
    except Exception as e:
        logger.error("Error during data source initialization", error=str(e))
        if settings.database_fail_fast:
            raise DatabaseInitializationError(str(e)) from e
        logger.warning(
            "Serving in degraded mode: storage requests will fail until the database is reachable",
            degraded=True,
        )

    yield

    # Shutdown
    logger.info("Shutting down Countries API...")
    await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Countries API",
        description="GraphQL access to country records",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Validate schema at startup to catch unresolved types early
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router()
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "countries.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
