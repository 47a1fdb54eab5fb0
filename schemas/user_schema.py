"""Schemas for the user's biometric input and the calorie result."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class ActivityLevel(str, Enum):
    """Self-reported activity levels offered by the form."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"
    EXTRA_ACTIVE = "Extra Active"


class SpecialNeed(str, Enum):
    """The user's goal, driving a flat calorie adjustment."""

    MAINTAIN = "Maintain"
    WEIGHT_LOSS = "Weight Loss"
    WEIGHT_GAIN = "Weight Gain"


class UserData(BaseModel):
    """Validated input for one calorie calculation.

    Fields are plain strings rather than the enums above: the calculator
    matches them itself and falls back to defaults for unknown values.
    Range checks are the form's job, not this model's.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., examples=["Alex"], description="User's name, used in the greeting")
    age: int = Field(..., examples=[30], description="Age in years")
    weight: float = Field(..., examples=[70.0], description="Weight in kilograms")
    height: float = Field(..., examples=[175.0], description="Height in centimeters")
    gender: str = Field(..., examples=["Male"], description="Male/Female, matched case-insensitively")
    activity_level: str = Field(..., examples=["Moderately Active"], description="Sedentary, Lightly Active, Moderately Active, Very Active, Extra Active")
    special_need: str = Field(..., examples=["Weight Loss"], description="Maintain, Weight Loss, Weight Gain")


class CalorieResult(BaseModel):
    """Daily calorie estimate plus the greeting shown to the user."""

    model_config = ConfigDict(frozen=True)

    calories: float
    message: str
