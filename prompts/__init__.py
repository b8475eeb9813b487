"""Static chatbot text."""

from prompts.chat_prompt import (
    HELLO_RESPONSE,
    HI_RESPONSE,
    WORKOUT_SPLITS_RESPONSE,
    DIET_PLANS_RESPONSE,
    FITNESS_ADVICE_RESPONSE,
    APOLOGY_RESPONSE,
)

__all__ = [
    "HELLO_RESPONSE",
    "HI_RESPONSE",
    "WORKOUT_SPLITS_RESPONSE",
    "DIET_PLANS_RESPONSE",
    "FITNESS_ADVICE_RESPONSE",
    "APOLOGY_RESPONSE",
]
