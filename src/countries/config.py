"""
Configuration management for the Countries API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///checkpoint.sqlite"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    # Refuse to start when the database cannot be initialized
    database_fail_fast: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/"
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "COUNTRIES_"
        case_sensitive = False


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        database_url=settings.database_url,
        environment=settings.environment,
    )
