"""Response models for the geocoding and news APIs."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..models import Article


class GeocodeProperties(BaseModel):
    """Properties of a reverse geocoding feature."""

    county: Optional[str] = Field(None, description="County name")
    city: Optional[str] = Field(None, description="City name")
    formatted: Optional[str] = Field(None, description="Formatted address")


class GeocodeFeature(BaseModel):
    """Single reverse geocoding feature."""

    properties: GeocodeProperties = Field(..., description="Feature properties")


class GeocodeResponse(BaseModel):
    """Reverse geocoding response body."""

    features: List[Any] = Field(..., description="Matching features, best first")


class NewsResponse(BaseModel):
    """News API response body."""

    status: Optional[str] = Field(None, description="API status field")
    total_results: Optional[int] = Field(None, alias="totalResults", description="Total hits")
    articles: List[Article] = Field(default_factory=list, description="Returned articles")
