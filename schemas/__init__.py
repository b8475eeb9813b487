"""Collection and request schemas."""

from schemas.enums import Goal, DietPreference
from schemas.user import User
from schemas.subscription import Subscription
from schemas.appointment import Appointment
from schemas.diet_plan import DietPlanRecord
from schemas.chat_history import ChatExchange
from schemas.forms import (
    ChatRequest,
    SubscribeRequest,
    DietPlanRequest,
    AppointmentRequest,
    GetStartedRequest,
    SignInRequest,
)

__all__ = [
    "Goal",
    "DietPreference",
    "User",
    "Subscription",
    "Appointment",
    "DietPlanRecord",
    "ChatExchange",
    "ChatRequest",
    "SubscribeRequest",
    "DietPlanRequest",
    "AppointmentRequest",
    "GetStartedRequest",
    "SignInRequest",
]
