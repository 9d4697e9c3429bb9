"""Data models for Local News."""

from .article import Article, ArticleSource, StoredArticle
from .location import LocationFix
from .share import ShareRequest

__all__ = ["Article", "ArticleSource", "LocationFix", "ShareRequest", "StoredArticle"]
