"""Share request model."""

from typing import Optional

from pydantic import BaseModel, Field


class ShareRequest(BaseModel):
    """Plain text share of a single article."""

    subject: Optional[str] = Field(None, description="Share subject, the article title")
    text: Optional[str] = Field(None, description="Share body, the article URL")
    chooser_title: str = Field("Share article via", description="Title of the share chooser")
