"""Chat model configuration."""

from typing import Dict, Any

from config.settings import settings

# Models used for free-form chat fallbacks
AGENT_CONFIG: Dict[str, Any] = {
    "chat_responder": {
        "model": settings.openai_model,
        "temperature": 0.7,
    },
}
