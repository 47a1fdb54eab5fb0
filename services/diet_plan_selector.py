"""Pick one of the fixed diet plans by daily calorie value."""

from core.logger import get_logger
from data.diet_plans import DIET_PLANS
from schemas.diet_schema import DietPlanTier

logger = get_logger("services.diet_plan_selector")

LOW_CALORIE_LIMIT = 1500
HIGH_CALORIE_LIMIT = 2200


class DietPlanSelector:
    """Maps a calorie value onto the low/medium/high plan bands."""

    def classify(self, calories: float) -> DietPlanTier:
        """Return the band for `calories`.

        Below 1500 is low, 1500 through 2200 inclusive is medium, anything
        else is high. NaN matches neither range test and lands in high.
        """
        if calories < LOW_CALORIE_LIMIT:
            tier = DietPlanTier.LOW
        elif LOW_CALORIE_LIMIT <= calories <= HIGH_CALORIE_LIMIT:
            tier = DietPlanTier.MEDIUM
        else:
            tier = DietPlanTier.HIGH
        logger.debug("Calories %s classified as %s", calories, tier.value)
        return tier

    def select_plan(self, calories: float) -> str:
        return DIET_PLANS[self.classify(calories)]


# export singleton
diet_plan_selector = DietPlanSelector()
select_plan = diet_plan_selector.select_plan
__all__ = ["DietPlanSelector", "diet_plan_selector", "select_plan"]
