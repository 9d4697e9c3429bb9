"""Build a fetch orchestrator from configuration."""

from typing import Callable, Optional

from psycopg_pool import ConnectionPool
from rich.console import Console

from ..clients import GeocodeClient, NewsClient
from ..config import Config
from ..db import ArticleStore
from ..location import ConfiguredLocationProvider, LocationProvider, LocationResolver
from ..network import ConnectivityChecker
from ..notifications import Notify, ignore
from .orchestrator import NewsOrchestrator, ShareSink

console = Console(stderr=True)


def create_news_client(config: Config, notify: Notify = ignore) -> NewsClient:
    """Create the news client from config."""
    news_config = config.config.news
    api_key = config.get_news_api_key()
    if not api_key:
        console.print("[yellow]Warning: No news API key found. Requests will be rejected.[/yellow]")

    return NewsClient(
        api_key=api_key,
        base_url=news_config.base_url,
        connect_timeout=news_config.connect_timeout,
        read_timeout=news_config.read_timeout,
        notify=notify,
    )


def build_orchestrator(
    config: Config,
    pool: ConnectionPool,
    notify: Notify = ignore,
    share: Optional[ShareSink] = None,
    provider: Optional[LocationProvider] = None,
    is_connected: Optional[Callable[[], bool]] = None,
) -> NewsOrchestrator:
    """Wire the clients, store and connectivity check into an orchestrator."""
    settings = config.config

    if provider is None:
        provider = ConfiguredLocationProvider(
            latitude=settings.location.latitude,
            longitude=settings.location.longitude,
            permission_granted=settings.location.permission_granted,
        )

    if is_connected is None:
        is_connected = ConnectivityChecker(
            probe_host=settings.network.probe_host,
            probe_port=settings.network.probe_port,
            timeout=settings.network.probe_timeout,
            probe_reachability=settings.network.probe_reachability,
        )

    geocode_key = config.get_geocode_api_key()
    if not geocode_key:
        console.print("[yellow]Warning: No geocoding API key found. Requests will be rejected.[/yellow]")

    return NewsOrchestrator(
        location_resolver=LocationResolver(provider, timeout=settings.location.timeout),
        geocode_client=GeocodeClient(
            api_key=geocode_key,
            base_url=settings.geocode.base_url,
            timeout=settings.geocode.timeout,
        ),
        news_client=create_news_client(config, notify),
        store=ArticleStore(pool),
        is_connected=is_connected,
        notify=notify,
        share=share,
        offline_fallback=settings.fetch.offline_fallback,
    )
