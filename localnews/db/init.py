"""Database initialization and schema management."""

from psycopg.errors import DatabaseError
from psycopg_pool import ConnectionPool
from rich.console import Console

from .connection import get_connection

console = Console()


SCHEMA_SQL = """
-- Saved articles
CREATE TABLE IF NOT EXISTS articles (
    id SERIAL PRIMARY KEY,
    source_name TEXT,
    author TEXT,
    title TEXT,
    description TEXT,
    url TEXT,
    image_url TEXT,
    published_at TEXT,
    content TEXT
);
"""


def validate_connection(pool: ConnectionPool) -> bool:
    """Validate database connection."""
    try:
        with get_connection(pool) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1 AS ok")
                result = cur.fetchone()
                return result is not None and result["ok"] == 1
    except Exception as e:
        console.print(f"[red]Database connection failed: {e}[/red]")
        return False


def init_database(pool: ConnectionPool) -> None:
    """Initialize database schema."""
    try:
        with get_connection(pool) as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            console.print("[green]Database schema initialized successfully[/green]")
    except DatabaseError as e:
        console.print(f"[red]Failed to initialize database schema: {e}[/red]")
        raise
