"""Request bodies for the form endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .enums import Goal, DietPreference


class ChatRequest(BaseModel):
    message: str = Field(..., description="User's chat message")


class SubscribeRequest(BaseModel):
    email: str


class DietPlanRequest(BaseModel):
    """Transform form submission."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    goal: Goal
    height: float = Field(..., description="Height in cm")
    weight: float = Field(..., description="Weight in kg")
    exercise_level: str = Field(..., alias="exerciseLevel")
    diet_preference: DietPreference = Field(..., alias="dietPreference")


class AppointmentRequest(BaseModel):
    name: str
    email: str
    phone: str
    date: str
    time: str


class GetStartedRequest(BaseModel):
    """Sign-up form submission."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone: str
    password: str
    goals: List[str]


class SignInRequest(BaseModel):
    email: str
    password: str
