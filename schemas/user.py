"""User collection schema."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class User(BaseModel):
    """User collection model."""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", description="First name")
    last_name: str = Field(..., alias="lastName", description="Last name")
    email: str = Field(..., description="Email address, used to look the user up")
    phone: str = Field(..., description="Contact phone number")
    password: str = Field(..., description="bcrypt hash of the password")
    goals: List[str] = Field(default_factory=list, description="Fitness goals picked at sign-up")
