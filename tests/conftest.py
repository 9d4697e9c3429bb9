import json
from contextlib import contextmanager

import httpx
import pytest

from localnews.clients import GeocodeClient, NewsClient
from localnews.db import ArticleStore
from localnews.location import LocationResolver, MockLocationProvider
from localnews.models import LocationFix
from localnews.pipeline import NewsOrchestrator


# -------------------------
# In-memory stand-in for a psycopg pool
# -------------------------
class FakeCursor:
    def __init__(self, table):
        self.table = table
        self.result = []
        self.statements = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.statements.append(sql)
        if "SELECT" in sql:
            self.result = [dict(row) for row in sorted(self.table.rows, key=lambda r: r["id"])]

    def executemany(self, sql, rows):
        self.statements.append(sql)
        for row in rows:
            self.table.next_id += 1
            self.table.rows.append({"id": self.table.next_id, **row})

    def fetchall(self):
        return self.result

    def fetchone(self):
        return self.result[0] if self.result else None


class FakeTable:
    def __init__(self):
        self.rows = []
        self.next_id = 0


class FakeConnection:
    def __init__(self, table):
        self.table = table
        self.commits = 0

    def cursor(self):
        return FakeCursor(self.table)

    def commit(self):
        self.commits += 1


class FakePool:
    def __init__(self):
        self.table = FakeTable()
        self.conn = FakeConnection(self.table)

    @contextmanager
    def connection(self):
        yield self.conn


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
def store(fake_pool):
    return ArticleStore(fake_pool)


# -------------------------
# HTTP fixtures
# -------------------------
def json_transport(payload, status_code=200, calls=None):
    """MockTransport answering every request with the same JSON body."""

    def handler(request):
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return httpx.MockTransport(handler)


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def geocode_calls():
    return []


@pytest.fixture
def news_calls():
    return []


@pytest.fixture
def geocode_client(geocode_calls):
    payload = {"features": [{"properties": {"county": "Bengaluru Urban"}}]}
    return GeocodeClient(api_key="geo-key", transport=json_transport(payload, calls=geocode_calls))


@pytest.fixture
def news_client(news_calls, notifications):
    payload = {"articles": [{"title": "A", "url": "http://x"}]}
    return NewsClient(
        api_key="news-key",
        notify=notifications.append,
        transport=json_transport(payload, calls=news_calls),
    )


@pytest.fixture
def provider():
    return MockLocationProvider(fix=LocationFix(latitude=12.97, longitude=77.59))


@pytest.fixture
def connected():
    return {"online": True}


@pytest.fixture
def shares():
    return []


@pytest.fixture
def orchestrator(provider, geocode_client, news_client, store, connected, notifications, shares):
    return NewsOrchestrator(
        location_resolver=LocationResolver(provider),
        geocode_client=geocode_client,
        news_client=news_client,
        store=store,
        is_connected=lambda: connected["online"],
        notify=notifications.append,
        share=shares.append,
    )
