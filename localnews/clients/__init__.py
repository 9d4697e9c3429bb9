"""HTTP clients for the geocoding and news APIs."""

from .geocode_client import GeocodeClient
from .models import GeocodeResponse, NewsResponse
from .news_client import NewsClient

__all__ = ["GeocodeClient", "GeocodeResponse", "NewsClient", "NewsResponse"]
