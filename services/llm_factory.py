"""Utility helpers for creating chat models."""

from typing import Optional

from config.agent_config import AGENT_CONFIG
from config.settings import settings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI
from utils.logger import setup_logger

logger = setup_logger(__name__)


def get_llm(agent_name: str, api_key: Optional[str] = None) -> BaseChatModel:
    """Create the OpenAI chat model configured for ``agent_name``.

    Raises ValueError for an unknown agent and RuntimeError when no API key
    is available.
    """
    config = AGENT_CONFIG.get(agent_name)
    if not config:
        raise ValueError(f"No agent configuration found for '{agent_name}'")

    api_key = api_key if api_key is not None else settings.openai_api_key
    if not api_key:
        raise RuntimeError(
            f"Unable to configure chat model for '{agent_name}'. "
            "Ensure OPENAI_API_KEY is provided."
        )

    llm = ChatOpenAI(
        model=config["model"],
        temperature=config.get("temperature", 0.7),
        api_key=api_key,
    )
    logger.info("Configured OpenAI model '%s' for %s", config["model"], agent_name)
    return llm
