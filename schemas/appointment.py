"""Appointment collection schema."""

from pydantic import BaseModel, Field


class Appointment(BaseModel):
    """Appointment collection model."""
    name: str = Field(..., description="Client name")
    email: str = Field(..., description="Client email")
    phone: str = Field(..., description="Client phone number")
    date: str = Field(..., description="Requested date as entered by the client")
    time: str = Field(..., description="Requested time as entered by the client")
