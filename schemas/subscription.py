"""Subscription collection schema."""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


class Subscription(BaseModel):
    """Newsletter subscription model."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., description="Subscribed email address")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")
