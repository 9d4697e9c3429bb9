"""Base model classes shared by the Local News models."""

from typing import Optional

from pydantic import BaseModel, Field


class WireModel(BaseModel):
    """Base model for values parsed from the external HTTP APIs."""

    class Config:
        """Pydantic config."""

        populate_by_name = True
        extra = "ignore"


class DBModel(BaseModel):
    """Base model for all database models."""

    id: Optional[int] = Field(None, description="Primary key")

    class Config:
        """Pydantic config."""

        from_attributes = True
