"""User-visible notification messages."""

from typing import Callable

Notify = Callable[[str], None]

ERROR_FETCHING_NEWS = "Error in fetching news"
NO_ARTICLES = "No articles available"
NO_ARTICLES_OFFLINE = "No articles available offline"
SHOWING_OFFLINE = "Showing offline news"
ARTICLES_SAVED = "Articles saved successfully!"
LOCATION_PERMISSION_DENIED = "Location permission denied"
LOCATION_FAILED = "Could not determine your location"


def ignore(message: str) -> None:
    """Drop a notification."""
