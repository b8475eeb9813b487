"""Diet plan collection schema."""

from pydantic import BaseModel, ConfigDict, Field
from .enums import Goal, DietPreference


class DietPlanRecord(BaseModel):
    """Diet plan request together with the generated plan."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    name: str
    email: str
    goal: Goal
    height: float = Field(..., description="Height in cm")
    weight: float = Field(..., description="Weight in kg")
    exercise_level: str = Field(..., alias="exerciseLevel")
    diet_preference: DietPreference = Field(..., alias="dietPreference")
    diet_plan: str = Field(..., alias="dietPlan", description="Generated HTML meal plan")
