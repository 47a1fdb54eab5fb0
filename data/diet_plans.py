"""Fixed diet plan texts, one per calorie band."""

from schemas.diet_schema import DietPlanTier

LOW_CALORIE_PLAN = (
    "Diet Plan for Weight Loss (Under 1500 Calories):\n\n"
    "🌅 Breakfast (8:00–9:00 AM)\n"
    "1 bowl oatmeal with fruits and nuts\n"
    "🧠 Nutrients: High in fiber and good carbs for sustained energy.\n\n"
    "--------------------\n\n"
    "🍛 Lunch (12:00–1:00 PM)\n"
    "1 cup mixed vegetables (steamed or sautéed) + 1 small bowl salad + 1 cup curd/yogurt\n"
    "🧠 Nutrients: Vitamins, fiber, and probiotics for gut health.\n\n"
    "--------------------\n\n"
    "🍲 Dinner (6:30–8:30 PM)\n"
    "Soup + salad + whole grain bread\n"
    "🧠 Keep dinner light to ease digestion."
)

MEDIUM_CALORIE_PLAN = (
    "Balanced Diet Plan (1500–2200 Calories):\n\n"
    "🌅 Breakfast (8:00–9:00 AM)\n"
    "Options: 2 boiled or scrambled eggs, 1–2 slices whole wheat toast, 1 cup milk or green tea OR 2 vegetable parathas (less oil) + curd\n"
    "🧠 Nutrients: High in protein, fiber, and good carbs.\n\n"
    "--------------------\n\n"
    "🍛 Lunch (12:00–1:00 PM)\n"
    "Balanced Plate: 1 cup brown rice or 2 chapatis, 1 cup dal (lentils), 1 cup mixed vegetables, 1 small bowl salad, 1 cup curd/yogurt\n"
    "🧠 Nutrients: A mix of protein, carbs, fiber, vitamins, and probiotics.\n\n"
    "--------------------\n\n"
    "🍲 Dinner (6:30–8:30 PM)\n"
    "Options: 2 chapatis + 1 cup dal + vegetable curry OR Grilled chicken/fish/tofu + stir-fried veggies\n"
    "🧠 A satisfying meal that's not too heavy on carbs."
)

HIGH_CALORIE_PLAN = (
    "Diet Plan for Weight Gain (Over 2200 Calories):\n\n"
    "🌅 Breakfast (8:00–9:00 AM)\n"
    "2 vegetable parathas (made with ghee) + curd + a handful of nuts\n"
    "🧠 Nutrients: Energy-dense with healthy fats and complex carbs.\n\n"
    "--------------------\n\n"
    "🍛 Lunch (12:00–1:00 PM)\n"
    "Balanced Plate: 1.5 cups brown rice or 3 chapatis, 1 large cup dal or grilled chicken/fish, 1 cup mixed vegetables, 1 small bowl salad, 1 cup full-fat yogurt\n"
    "🧠 Nutrients: Increased portions of protein and carbs for muscle growth.\n\n"
    "--------------------\n\n"
    "🍲 Dinner (6:30–8:30 PM)\n"
    "3 chapatis + 1 cup dal + vegetable curry + a side of paneer/tofu\n"
    "🧠 A hearty, protein-rich meal to support muscle repair and growth overnight."
)

DIET_PLANS = {
    DietPlanTier.LOW: LOW_CALORIE_PLAN,
    DietPlanTier.MEDIUM: MEDIUM_CALORIE_PLAN,
    DietPlanTier.HIGH: HIGH_CALORIE_PLAN,
}
