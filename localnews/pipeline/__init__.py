"""Fetch flow orchestration."""

from .factory import build_orchestrator, create_news_client
from .orchestrator import FetchRun, FetchState, NewsOrchestrator

__all__ = [
    "FetchRun",
    "FetchState",
    "NewsOrchestrator",
    "build_orchestrator",
    "create_news_client",
]
