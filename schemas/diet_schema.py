"""Schemas for diet plan selection."""

from enum import Enum


class DietPlanTier(str, Enum):
    """Calorie band a diet plan is written for."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
