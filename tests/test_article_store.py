from unittest import mock

import psycopg
import pytest

from localnews.db import ArticleStore
from localnews.errors import StoreError
from localnews.models import Article, ArticleSource


def make_article(title, source="Daily"):
    return Article(
        source=ArticleSource(name=source),
        author="Author",
        title=title,
        description="desc",
        url=f"https://example.com/{title}",
        image_url=None,
        published_at="2024-05-01T10:00:00Z",
        content="body",
    )


def test_insert_assigns_distinct_ids(store, fake_pool):
    store.insert([make_article("a"), make_article("b"), make_article("c")])

    stored = store.get_all()

    assert [s.title for s in stored] == ["a", "b", "c"]
    assert len({s.id for s in stored}) == 3
    assert stored[0].source_name == "Daily"
    assert fake_pool.conn.commits == 1


def test_insert_does_not_dedup(store):
    article = make_article("same")

    store.insert([article])
    store.insert([article])

    stored = store.get_all()
    assert len(stored) == 2
    assert stored[0].id != stored[1].id


def test_get_all_is_idempotent(store):
    store.insert([make_article("a"), make_article("b")])

    assert store.get_all() == store.get_all()


def test_insert_empty_list_skips_database(store, fake_pool):
    store.insert([])

    assert fake_pool.conn.commits == 0
    assert store.get_all() == []


def test_source_collapses_to_name(store):
    store.insert([Article(title="no source")])

    stored = store.get_all()[0]
    assert stored.source_name is None
    assert stored.to_article().source.name == ""


def test_database_error_becomes_store_error():
    pool = mock.MagicMock()
    pool.connection.return_value.__enter__.side_effect = psycopg.OperationalError("down")
    store = ArticleStore(pool)

    with pytest.raises(StoreError):
        store.get_all()
    with pytest.raises(StoreError):
        store.insert([make_article("a")])
