"""Article models for fetched and stored news."""

from typing import Optional

from pydantic import Field

from .base import DBModel, WireModel


class ArticleSource(WireModel):
    """Publisher of an article as reported by the news API."""

    name: Optional[str] = Field(None, description="Source name")


class Article(WireModel):
    """Article as returned by the news search API."""

    source: Optional[ArticleSource] = Field(None, description="Publishing source")
    author: Optional[str] = Field(None, description="Article author")
    title: Optional[str] = Field(None, description="Article title")
    description: Optional[str] = Field(None, description="Short description")
    url: Optional[str] = Field(None, description="Canonical article URL")
    image_url: Optional[str] = Field(None, alias="urlToImage", description="Lead image URL")
    published_at: Optional[str] = Field(
        None, alias="publishedAt", description="Publication timestamp, kept as sent"
    )
    content: Optional[str] = Field(None, description="Body content")


class StoredArticle(DBModel):
    """Article saved in the local store.

    The source object is reduced to its name, so converting back to an
    ``Article`` is lossy.
    """

    source_name: Optional[str] = Field(None, description="Name of the publishing source")
    author: Optional[str] = Field(None, description="Article author")
    title: Optional[str] = Field(None, description="Article title")
    description: Optional[str] = Field(None, description="Short description")
    url: Optional[str] = Field(None, description="Canonical article URL")
    image_url: Optional[str] = Field(None, description="Lead image URL")
    published_at: Optional[str] = Field(None, description="Publication timestamp")
    content: Optional[str] = Field(None, description="Body content")

    @classmethod
    def from_article(cls, article: Article) -> "StoredArticle":
        """Build an unsaved record from a fetched article."""
        return cls(
            source_name=article.source.name if article.source else None,
            author=article.author,
            title=article.title,
            description=article.description,
            url=article.url,
            image_url=article.image_url,
            published_at=article.published_at,
            content=article.content,
        )

    def to_article(self) -> Article:
        """Convert back to an article for display."""
        return Article(
            source=ArticleSource(name=self.source_name or ""),
            author=self.author,
            title=self.title,
            description=self.description,
            url=self.url,
            image_url=self.image_url,
            published_at=self.published_at,
            content=self.content,
        )
