"""Enums for collection fields."""

from enum import Enum


class Goal(str, Enum):
    """Diet plan goal."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTAIN_WEIGHT = "maintain_weight"
    OTHER = "other"


class DietPreference(str, Enum):
    """Diet preference accepted by the diet plan form; ``other`` gets the non-vegetarian plan."""
    VEGETARIAN = "vegetarian"
    OTHER = "other"
