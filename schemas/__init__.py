"""Pydantic schema package for input and result models."""

from .user_schema import UserData, CalorieResult, Gender, ActivityLevel, SpecialNeed
from .diet_schema import DietPlanTier

__all__ = [
    "UserData",
    "CalorieResult",
    "Gender",
    "ActivityLevel",
    "SpecialNeed",
    "DietPlanTier",
]
