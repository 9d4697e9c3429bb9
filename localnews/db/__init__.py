"""Database management for Local News."""

from .articles import ArticleStore
from .connection import create_connection_pool, get_connection
from .init import init_database, validate_connection

__all__ = [
    "ArticleStore",
    "create_connection_pool",
    "get_connection",
    "init_database",
    "validate_connection",
]
