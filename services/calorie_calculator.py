"""Daily calorie estimate from biometric input.

BMR is estimated with the revised Harris-Benedict coefficients, scaled by an
activity factor and shifted by a flat goal adjustment. Input is assumed to be
validated already (see `services.form_validator`); nothing here raises.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict

from core.logger import get_logger
from schemas.user_schema import ActivityLevel, CalorieResult, Gender, SpecialNeed, UserData

logger = get_logger("services.calorie_calculator")

DEFAULT_ACTIVITY_FACTOR = 1.2

ACTIVITY_FACTORS: Dict[str, float] = {
    ActivityLevel.SEDENTARY.value: DEFAULT_ACTIVITY_FACTOR,
    ActivityLevel.LIGHTLY_ACTIVE.value: 1.375,
    ActivityLevel.MODERATELY_ACTIVE.value: 1.55,
    ActivityLevel.VERY_ACTIVE.value: 1.725,
    ActivityLevel.EXTRA_ACTIVE.value: 1.9,
}

GOAL_ADJUSTMENTS: Dict[str, float] = {
    SpecialNeed.WEIGHT_LOSS.value: -500,
    SpecialNeed.WEIGHT_GAIN.value: 500,
}

MESSAGE_TEMPLATE = "Hello {name}!\nYour daily calorie need is: {calories} kcal/day."


def format_calories(calories: float) -> str:
    """Format to two decimals, rounding ties away from zero.

    Rounding works on the shortest decimal form of the value, so 2.675
    renders as 2.68. Every integer digit is kept however large the value.
    Non-finite values render as NaN, Infinity or -Infinity.
    """
    if math.isnan(calories):
        return "NaN"
    if math.isinf(calories):
        return "Infinity" if calories > 0 else "-Infinity"
    value = Decimal(repr(calories))
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + 4)
        return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):f}"


class CalorieCalculator:
    """Stateless calculator; one shared instance is exported below."""

    def calculate_bmr(self, age: int, weight: float, height: float, gender: str) -> float:
        """Base metabolic rate; any gender other than "male" uses the female coefficients."""
        if gender.lower() == Gender.MALE.value.lower():
            return 88.36 + (13.4 * weight) + (4.8 * height) - (5.7 * age)
        return 447.6 + (9.2 * weight) + (3.1 * height) - (4.3 * age)

    def activity_factor(self, activity_level: str) -> float:
        """Exact-match lookup; unknown levels count as sedentary."""
        return ACTIVITY_FACTORS.get(activity_level, DEFAULT_ACTIVITY_FACTOR)

    def goal_adjustment(self, special_need: str) -> float:
        """Flat calorie shift for the goal; 0 for anything unrecognised."""
        return GOAL_ADJUSTMENTS.get(special_need, 0)

    def calculate(self, user_data: UserData) -> CalorieResult:
        """Estimate daily calories and build the greeting message.

        Implausible inputs are not rejected and may yield a negative value.
        """
        bmr = self.calculate_bmr(user_data.age, user_data.weight, user_data.height, user_data.gender)
        logger.debug("BMR calculated: %s", bmr)

        calories = bmr * self.activity_factor(user_data.activity_level)
        adjustment = self.goal_adjustment(user_data.special_need)
        if adjustment:
            calories += adjustment
        logger.debug("Calories for goal %s: %s", user_data.special_need, calories)

        message = MESSAGE_TEMPLATE.format(name=user_data.name, calories=format_calories(calories))
        return CalorieResult(calories=calories, message=message)


# export singleton
calorie_calculator = CalorieCalculator()
calculate = calorie_calculator.calculate
__all__ = ["CalorieCalculator", "calorie_calculator", "calculate", "format_calories"]
