"""Keyword chatbot with an OpenAI fallback."""

from typing import Callable, List, Optional, Tuple

from langchain_core.messages import HumanMessage

from models.database import CHAT_HISTORY, Database
from prompts import (
    APOLOGY_RESPONSE,
    DIET_PLANS_RESPONSE,
    FITNESS_ADVICE_RESPONSE,
    HELLO_RESPONSE,
    HI_RESPONSE,
    WORKOUT_SPLITS_RESPONSE,
)
from schemas.chat_history import ChatExchange
from services.llm_factory import get_llm
from utils.errors import StorageUnavailable, UpstreamUnavailable
from utils.logger import setup_logger

logger = setup_logger(__name__)

Predicate = Callable[[str], bool]


def contains(keyword: str) -> Predicate:
    """Predicate matching messages that contain ``keyword``."""
    def predicate(message: str) -> bool:
        return keyword in message
    predicate.keyword = keyword
    return predicate


# Evaluated in order; the first predicate that matches wins.
KEYWORD_RESPONSES: List[Tuple[Predicate, str]] = [
    (contains("hello"), HELLO_RESPONSE),
    (contains("hi"), HI_RESPONSE),
    (contains("workout splits"), WORKOUT_SPLITS_RESPONSE),
    (contains("diet plans"), DIET_PLANS_RESPONSE),
    (contains("fitness advice"), FITNESS_ADVICE_RESPONSE),
]


def match_keyword(message: str) -> Optional[str]:
    """Return the canned response for a lowercased message, or None."""
    for predicate, response in KEYWORD_RESPONSES:
        if predicate(message):
            return response
    return None


class CompletionService:
    """Single-turn text completion through the configured chat model."""

    def __init__(self, agent_name: str = "chat_responder", api_key: Optional[str] = None):
        self.agent_name = agent_name
        self.api_key = api_key
        self._llm = None

    async def complete(self, prompt: str) -> str:
        try:
            if self._llm is None:
                self._llm = get_llm(self.agent_name, api_key=self.api_key)
            result = await self._llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise UpstreamUnavailable(f"Completion request failed: {e}") from e
        return result.content


class ChatResponder:
    """Answers chat messages and logs every exchange."""

    def __init__(self, database: Database, completion: CompletionService):
        self.database = database
        self.completion = completion

    async def respond(self, message: str) -> str:
        user_message = message.lower()
        bot_response = match_keyword(user_message)

        if bot_response is None:
            try:
                bot_response = await self.completion.complete(user_message)
            except UpstreamUnavailable as e:
                logger.error(f"Error fetching chat completion: {e}")
                bot_response = APOLOGY_RESPONSE

        await self.record(user_message, bot_response)
        return bot_response

    async def record(self, user_message: str, bot_response: str):
        """Append the exchange to the chat history. Failures are logged only."""
        exchange = ChatExchange(user_message=user_message, bot_response=bot_response)
        try:
            inserted_id = await self.database.insert_one(CHAT_HISTORY, exchange.model_dump(by_alias=True))
            logger.info(f"Conversation saved: {inserted_id}")
        except StorageUnavailable as e:
            logger.error(f"Error saving conversation: {e}")
