import httpx
import pytest

from localnews.clients import NewsClient
from localnews.notifications import ERROR_FETCHING_NEWS
from tests.conftest import json_transport

FULL_ARTICLE = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "Reporter",
    "title": "Rain in the city",
    "description": "It rained.",
    "url": "https://example.com/rain",
    "urlToImage": "https://example.com/rain.jpg",
    "publishedAt": "2024-05-01T10:00:00Z",
    "content": "Full story",
}


def make_client(transport, notifications=None):
    return NewsClient(
        api_key="news-key",
        notify=notifications.append if notifications is not None else (lambda message: None),
        transport=transport,
    )


@pytest.mark.asyncio
async def test_search_parses_articles_in_order():
    second = {"title": "Second", "url": "https://example.com/2"}
    client = make_client(json_transport({"status": "ok", "articles": [FULL_ARTICLE, second]}))

    articles = await client.search_news_by_city("Bengaluru Urban")

    assert [a.title for a in articles] == ["Rain in the city", "Second"]
    first = articles[0]
    assert first.source.name == "BBC News"
    assert first.image_url == "https://example.com/rain.jpg"
    assert first.published_at == "2024-05-01T10:00:00Z"
    assert articles[1].author is None
    assert articles[1].source is None


@pytest.mark.asyncio
async def test_search_encodes_city_and_sends_key():
    calls = []
    client = make_client(json_transport({"articles": []}, calls=calls))

    await client.search_news_by_city("São Paulo & Co")

    request = calls[0]
    assert request.url.path == "/v2/everything"
    assert request.url.params["q"] == "São Paulo & Co"
    assert request.url.params["apiKey"] == "news-key"
    assert "S%C3%A3o" in str(request.url)


@pytest.mark.asyncio
async def test_search_non_200_returns_empty_without_notification():
    notifications = []
    client = make_client(json_transport({"status": "error"}, status_code=429), notifications)

    assert await client.search_news_by_city("Pune") == []
    assert notifications == []


@pytest.mark.asyncio
async def test_search_transport_error_returns_empty_and_notifies():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    notifications = []
    client = make_client(httpx.MockTransport(handler), notifications)

    assert await client.search_news_by_city("Pune") == []
    assert notifications == [ERROR_FETCHING_NEWS]


@pytest.mark.asyncio
async def test_search_malformed_json_returns_empty_and_notifies():
    notifications = []
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"not json"))
    client = make_client(transport, notifications)

    assert await client.search_news_by_city("Pune") == []
    assert notifications == [ERROR_FETCHING_NEWS]


def test_timeouts_are_bounded():
    client = NewsClient(api_key="k")

    assert client.timeout.connect == 10.0
    assert client.timeout.read == 10.0


@pytest.mark.asyncio
async def test_top_headlines_uses_country():
    calls = []
    client = make_client(json_transport({"articles": [FULL_ARTICLE]}, calls=calls))

    articles = await client.top_headlines("in")

    assert len(articles) == 1
    assert calls[0].url.path == "/v2/top-headlines"
    assert calls[0].url.params["country"] == "in"
