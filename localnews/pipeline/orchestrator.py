"""Fetch orchestrator that drives the online chain and the offline fallback."""

import asyncio
import time
from enum import Enum
from typing import Callable, Dict, List, Optional

from rich.console import Console

from ..clients import GeocodeClient, NewsClient
from ..db import ArticleStore
from ..errors import LocationError, MalformedResponse, NetworkError, PermissionDenied
from ..location import LocationResolver
from ..models import Article, ShareRequest
from ..notifications import (
    ARTICLES_SAVED,
    LOCATION_FAILED,
    LOCATION_PERMISSION_DENIED,
    NO_ARTICLES,
    NO_ARTICLES_OFFLINE,
    SHOWING_OFFLINE,
    Notify,
    ignore,
)

console = Console(stderr=True)

ShareSink = Callable[[ShareRequest], None]


class FetchState(str, Enum):
    """States of a single fetch action."""

    IDLE = "idle"
    CHECKING_CONNECTIVITY = "checking_connectivity"
    ONLINE_CHAIN = "online_chain"
    OFFLINE_LOAD = "offline_load"
    DISPLAYING = "displaying"
    FAILED = "failed"


class FetchRun:
    """Bookkeeping for one fetch action."""

    def __init__(self, sequence: int):
        self.sequence = sequence
        self.state = FetchState.IDLE
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.online: Optional[bool] = None
        self.city: Optional[str] = None
        self.articles: List[Article] = []
        self.stale = False
        self.error: Optional[str] = None
        self.stats: Dict = {}

    def start(self):
        """Mark fetch as started."""
        self.start_time = time.time()
        self.state = FetchState.CHECKING_CONNECTIVITY

    def complete(self, articles: List[Article], stale: bool = False):
        """Mark fetch as completed with a result list."""
        self.end_time = time.time()
        self.articles = articles
        self.stale = stale
        self.state = FetchState.DISPLAYING
        self.stats["articles"] = len(articles)

    def fail(self, error: str):
        """Mark fetch as aborted."""
        self.end_time = time.time()
        self.error = error
        self.state = FetchState.FAILED

    @property
    def duration(self) -> float:
        """Get fetch duration in seconds."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


class NewsOrchestrator:
    """Coordinates fetching, saving and sharing of location based news.

    The displayed list always belongs to the most recently started fetch:
    each fetch takes a sequence number and a chain finishing after a newer
    one was started is dropped.
    """

    def __init__(
        self,
        location_resolver: LocationResolver,
        geocode_client: GeocodeClient,
        news_client: NewsClient,
        store: ArticleStore,
        is_connected: Callable[[], bool],
        notify: Notify = ignore,
        share: Optional[ShareSink] = None,
        offline_fallback: bool = True,
    ):
        """Initialize fetch orchestrator."""
        self.location_resolver = location_resolver
        self.geocode_client = geocode_client
        self.news_client = news_client
        self.store = store
        self.is_connected = is_connected
        self.notify = notify
        self.share = share
        self.offline_fallback = offline_fallback

        self.articles: List[Article] = []
        self.articles_to_save: List[Article] = []
        self.state = FetchState.IDLE
        self._sequence = 0
        self._pending_notification: Optional[str] = None

    def _is_latest(self, run: FetchRun) -> bool:
        return run.sequence == self._sequence

    def _set_state(self, run: FetchRun, state: FetchState) -> None:
        run.state = state
        if self._is_latest(run):
            self.state = state

    def _show_notification(self) -> None:
        """Emit the pending one-shot notification and clear it."""
        if self._pending_notification is not None:
            message = self._pending_notification
            self._pending_notification = None
            self.notify(message)

    def _display(self, run: FetchRun, articles: List[Article], notification: Optional[str]) -> None:
        """Replace the displayed list if the run is still the latest."""
        if not self._is_latest(run):
            console.print(
                f"[dim]Dropping result of fetch #{run.sequence}, "
                f"fetch #{self._sequence} is newer[/dim]"
            )
            run.complete(articles, stale=True)
            return

        self.articles = articles
        run.complete(articles)
        self.state = FetchState.DISPLAYING
        self._pending_notification = notification
        self._show_notification()

    async def _run_online_chain(self, run: FetchRun) -> List[Article]:
        """Location fix, then city name, then news search."""
        fix = await self.location_resolver.resolve_current_location()
        run.stats["latitude"] = fix.latitude
        run.stats["longitude"] = fix.longitude

        city = await self.geocode_client.reverse_geocode(fix.latitude, fix.longitude)
        run.city = city
        if not city:
            console.print("[yellow]No place found for the current location[/yellow]")

        return await self.news_client.search_news_by_city(city)

    def _load_offline(self) -> List[Article]:
        """Read saved articles for display."""
        return [stored.to_article() for stored in self.store.get_all()]

    def _load_offline_or_fail(self, run: FetchRun) -> List[Article]:
        """Load saved articles, marking the run failed if the store errors."""
        try:
            return self._load_offline()
        except Exception as e:
            run.fail(str(e))
            if self._is_latest(run):
                self.state = FetchState.FAILED
            raise

    def _offline_notification(self, articles: List[Article]) -> str:
        return SHOWING_OFFLINE if articles else NO_ARTICLES_OFFLINE

    async def fetch_news(self) -> FetchRun:
        """Run one fetch action and update the displayed list.

        Location and geocode failures either fall back to the saved articles
        or, when the fallback is disabled, abort the fetch and leave the
        displayed list untouched. Store errors propagate.
        """
        self._sequence += 1
        run = FetchRun(self._sequence)
        run.start()
        self._set_state(run, FetchState.CHECKING_CONNECTIVITY)

        # Interface and socket checks block; keep them off the event loop
        run.online = await asyncio.to_thread(self.is_connected)

        if run.online:
            self._set_state(run, FetchState.ONLINE_CHAIN)
            try:
                articles = await self._run_online_chain(run)
            except (LocationError, NetworkError, MalformedResponse) as e:
                console.print(f"[red]Fetch #{run.sequence} failed: {e}[/red]")
                if self._is_latest(run):
                    if isinstance(e, PermissionDenied):
                        self.notify(LOCATION_PERMISSION_DENIED)
                    else:
                        self.notify(LOCATION_FAILED)

                if not self.offline_fallback:
                    run.fail(str(e))
                    if self._is_latest(run):
                        self.state = FetchState.FAILED
                    return run

                run.error = str(e)
                self._set_state(run, FetchState.OFFLINE_LOAD)
                articles = self._load_offline_or_fail(run)
                self._display(run, articles, self._offline_notification(articles))
                return run

            self._display(run, articles, None if articles else NO_ARTICLES)
            return run

        self._set_state(run, FetchState.OFFLINE_LOAD)
        articles = self._load_offline_or_fail(run)

        self._display(run, articles, self._offline_notification(articles))
        return run

    def save_news(self) -> int:
        """Save the displayed articles to the local store.

        Returns:
            Number of articles saved
        """
        self.articles_to_save = list(self.articles)
        if not self.articles_to_save:
            self.notify(NO_ARTICLES)
            return 0

        self.store.insert(self.articles_to_save)
        self.notify(ARTICLES_SAVED)
        return len(self.articles_to_save)

    def share_news(self) -> Optional[ShareRequest]:
        """Share the first displayed article, if any."""
        if not self.articles:
            return None

        article = self.articles[0]
        request = ShareRequest(subject=article.title, text=article.url)
        if self.share is not None:
            self.share(request)
        return request
