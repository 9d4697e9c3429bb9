"""Saved article storage."""

from typing import List

import psycopg
from psycopg_pool import ConnectionPool

from ..errors import StoreError
from ..models import Article, StoredArticle
from .connection import get_connection

INSERT_SQL = """
    INSERT INTO articles (
        source_name, author, title, description,
        url, image_url, published_at, content
    ) VALUES (
        %(source_name)s, %(author)s, %(title)s, %(description)s,
        %(url)s, %(image_url)s, %(published_at)s, %(content)s
    )
"""

SELECT_ALL_SQL = """
    SELECT
        id, source_name, author, title, description,
        url, image_url, published_at, content
    FROM articles
    ORDER BY id
"""


class ArticleStore:
    """Append-only store of saved articles.

    Every insert creates new rows; saving the same article twice keeps both
    copies. Rows come back in insertion order.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """Initialize article store."""
        self.pool = pool

    def insert(self, articles: List[Article]) -> None:
        """Insert articles, each getting a new id."""
        if not articles:
            return

        rows = [
            StoredArticle.from_article(article).model_dump(exclude={"id"})
            for article in articles
        ]

        try:
            with get_connection(self.pool) as conn:
                with conn.cursor() as cur:
                    cur.executemany(INSERT_SQL, rows)
                conn.commit()
        except psycopg.Error as e:
            raise StoreError(f"Failed to save articles: {e}") from e

    def get_all(self) -> List[StoredArticle]:
        """Get all saved articles."""
        try:
            with get_connection(self.pool) as conn:
                with conn.cursor() as cur:
                    cur.execute(SELECT_ALL_SQL)
                    rows = cur.fetchall()
        except psycopg.Error as e:
            raise StoreError(f"Failed to load saved articles: {e}") from e

        return [StoredArticle(**row) for row in rows]
