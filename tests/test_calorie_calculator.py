"""Unit tests for the calorie calculator."""
import math
import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from schemas.user_schema import CalorieResult, UserData
from services.calorie_calculator import CalorieCalculator, calculate, format_calories

ACTIVITY_CASES = [
    ("Sedentary", 1.2),
    ("Lightly Active", 1.375),
    ("Moderately Active", 1.55),
    ("Very Active", 1.725),
    ("Extra Active", 1.9),
]


def make_user(**overrides):
    fields = {
        "name": "Alex",
        "age": 30,
        "weight": 70.0,
        "height": 175.0,
        "gender": "Male",
        "activity_level": "Moderately Active",
        "special_need": "Weight Loss",
    }
    fields.update(overrides)
    return UserData(**fields)


def test_example_user_weight_loss():
    """Alex, 30, 70kg, 175cm, moderately active, losing weight."""
    result = calculate(make_user())
    assert isinstance(result, CalorieResult)
    assert result.calories == pytest.approx(2127.808)
    assert result.message == "Hello Alex!\nYour daily calorie need is: 2127.81 kcal/day."


@pytest.mark.parametrize("activity_level,factor", ACTIVITY_CASES)
@pytest.mark.parametrize("special_need,adjustment", [("Weight Loss", -500), ("Weight Gain", 500), ("Maintain", 0)])
def test_male_formula_is_reproduced_exactly(activity_level, factor, special_need, adjustment):
    user = make_user(age=41, weight=82.5, height=181.0, activity_level=activity_level, special_need=special_need)
    bmr = 88.36 + (13.4 * 82.5) + (4.8 * 181.0) - (5.7 * 41)
    expected = bmr * factor
    if adjustment:
        expected += adjustment
    assert calculate(user).calories == expected


@pytest.mark.parametrize("activity_level,factor", ACTIVITY_CASES)
def test_female_formula_is_reproduced_exactly(activity_level, factor):
    user = make_user(gender="Female", age=27, weight=58.0, height=163.5, activity_level=activity_level, special_need="Weight Gain")
    bmr = 447.6 + (9.2 * 58.0) + (3.1 * 163.5) - (4.3 * 27)
    assert calculate(user).calories == bmr * factor + 500


@pytest.mark.parametrize("gender", ["male", "MALE", "mAlE"])
def test_gender_match_ignores_case(gender):
    assert calculate(make_user(gender=gender)).calories == calculate(make_user()).calories


@pytest.mark.parametrize("gender", ["Female", "Other", ""])
def test_any_non_male_gender_uses_female_coefficients(gender):
    calc = CalorieCalculator()
    assert calc.calculate_bmr(30, 70.0, 175.0, gender) == 447.6 + (9.2 * 70.0) + (3.1 * 175.0) - (4.3 * 30)


@pytest.mark.parametrize("activity_level", ["lightly active", "Super Active", "", "Very  Active"])
def test_unrecognised_activity_level_defaults_to_sedentary(activity_level):
    assert CalorieCalculator().activity_factor(activity_level) == 1.2


@pytest.mark.parametrize("special_need", ["Maintain", "weight loss", "Gain", ""])
def test_unrecognised_goal_has_no_adjustment(special_need):
    assert CalorieCalculator().goal_adjustment(special_need) == 0
    plain = make_user(special_need="Maintain")
    assert calculate(make_user(special_need=special_need)).calories == calculate(plain).calories


def test_implausible_input_yields_negative_result():
    """No clamping: tiny body at a very old age goes below zero."""
    result = calculate(make_user(name="Old", gender="Female", age=120, weight=1.0, height=1.0,
                                 activity_level="Sedentary", special_need="Maintain"))
    assert result.calories < 0
    assert result.message == "Hello Old!\nYour daily calorie need is: -67.32 kcal/day."


def test_repeated_calls_are_identical():
    user = make_user()
    assert calculate(user) == calculate(user)


def test_user_data_is_immutable():
    user = make_user()
    with pytest.raises(PydanticValidationError):
        user.age = 31


@pytest.mark.parametrize("value,text", [
    (2127.808, "2127.81"),
    (1500.0, "1500.00"),
    (0.125, "0.13"),
    (-0.125, "-0.13"),
    (2.675, "2.68"),
    (1.005, "1.01"),
    (1.608e31, "16080000000000000000000000000000.00"),
    (math.nan, "NaN"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
])
def test_format_calories(value, text):
    assert format_calories(value) == text


def test_huge_weight_keeps_every_digit():
    """Values far beyond everyday range still format in plain notation."""
    result = calculate(make_user(weight=1e30))
    assert result.calories > 1e31
    assert re.search(r"is: \d{32}\.\d{2} kcal/day\.$", result.message)
