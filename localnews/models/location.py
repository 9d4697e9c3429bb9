"""Location models."""

from pydantic import BaseModel, Field


class LocationFix(BaseModel):
    """A single resolved latitude/longitude reading."""

    latitude: float = Field(..., description="Latitude in degrees", ge=-90.0, le=90.0)
    longitude: float = Field(..., description="Longitude in degrees", ge=-180.0, le=180.0)
