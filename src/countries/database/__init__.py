"""
Database module for the Countries API
"""

from .connection import (
    dispose_database,
    get_async_session,
    get_session_factory,
    init_database,
    sync_schema,
)

__all__ = [
    "dispose_database",
    "get_async_session",
    "get_session_factory",
    "init_database",
    "sync_schema",
]
