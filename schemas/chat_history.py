"""Chat history collection schema."""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


class ChatExchange(BaseModel):
    """One chat turn."""
    model_config = ConfigDict(populate_by_name=True)

    user_message: str = Field(..., alias="userMessage")
    bot_response: str = Field(..., alias="botResponse")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
