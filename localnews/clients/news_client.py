"""News search client."""

from typing import List, Optional

import httpx
from rich.console import Console

from ..models import Article
from ..notifications import ERROR_FETCHING_NEWS, Notify, ignore
from .models import NewsResponse

console = Console(stderr=True)

NEWSAPI_BASE_URL = "https://newsapi.org/v2"


class NewsClient:
    """Search the news API.

    Failures never reach the caller: any unsuccessful status or exception
    yields an empty list, so "no results" and "request failed" look the same.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = NEWSAPI_BASE_URL,
        connect_timeout: float = 10.0,
        read_timeout: float = 10.0,
        notify: Notify = ignore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize news client."""
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout, read=read_timeout, write=read_timeout, pool=connect_timeout
        )
        self.notify = notify
        self.transport = transport

    async def _get_articles(self, endpoint: str, params: dict) -> List[Article]:
        """Run a GET against the news API and parse the article list."""
        params = {**params, "apiKey": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(f"{self.base_url}/{endpoint}", params=params)

                if response.status_code != httpx.codes.OK:
                    console.print(f"[yellow]Unsuccessful response: {response.status_code}[/yellow]")
                    return []

                news = NewsResponse.model_validate_json(response.content)
                return news.articles

        except Exception as e:
            console.print(f"[red]Error in fetching news: {e}[/red]")
            self.notify(ERROR_FETCHING_NEWS)
            return []

    async def search_news_by_city(self, city: str) -> List[Article]:
        """Search articles mentioning a city."""
        return await self._get_articles("everything", {"q": city})

    async def top_headlines(self, country: str = "in") -> List[Article]:
        """Get top headlines for a country code."""
        return await self._get_articles("top-headlines", {"country": country})
