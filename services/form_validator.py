"""Validation of raw form input before it reaches the calculator.

The calculator trusts its input, so every check lives here: required
selections, required text fields, and number parsing. Checks run in a fixed
order and the first failure is raised as a `ValidationError` whose message
is meant to be shown to the user as-is.
"""

import math
import re
from enum import Enum
from typing import Optional, Type

from core.exceptions import ValidationError
from core.logger import get_logger
from schemas.user_schema import ActivityLevel, Gender, SpecialNeed, UserData

logger = get_logger("services.form_validator")

PLACEHOLDER_PREFIX = "Select"

_INTEGER_RE = re.compile(r"[+-]?\d+")


def is_selected(value: Optional[str]) -> bool:
    """False for blank values and for the "Select ..." placeholder entry."""
    if value is None:
        return False
    value = value.strip()
    return bool(value) and not value.startswith(PLACEHOLDER_PREFIX)


def _reject(message: str, field: str):
    logger.warning("Form rejected on %s: %s", field, message)
    raise ValidationError(message, field=field)


def _parse_int(raw: str, field: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        _reject(f"Please enter a whole number for {field}", field)
    value = int(raw)
    if value <= 0:
        _reject(f"Please enter a positive value for {field}", field)
    return value


def _parse_float(raw: str, field: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        _reject(f"Please enter a number for {field}", field)
    if not math.isfinite(value) or value <= 0:
        _reject(f"Please enter a positive value for {field}", field)
    return value


def _check_option(value: str, options: Type[Enum], field: str) -> str:
    value = value.strip()
    if value not in {option.value for option in options}:
        _reject(f"Unrecognised {field.replace('_', ' ')}: {value}", field)
    return value


def validate_form(
    name: Optional[str],
    age: Optional[str],
    weight: Optional[str],
    height: Optional[str],
    gender: Optional[str],
    activity_level: Optional[str],
    special_need: Optional[str],
) -> UserData:
    """Turn raw form fields into a `UserData`.

    Args:
        name: Free text; surrounding whitespace is dropped.
        age: Whole number of years, as typed.
        weight: Kilograms, as typed.
        height: Centimeters, as typed.
        gender: Selected gender option or a placeholder.
        activity_level: Selected activity option or a placeholder.
        special_need: Selected goal option or a placeholder.

    Raises:
        ValidationError: On the first missing or malformed field.
    """
    if not is_selected(gender):
        _reject("Please select a gender", "gender")
    if not is_selected(activity_level):
        _reject("Please select a physical activity level", "activity_level")
    if not is_selected(special_need):
        _reject("Please select a goal", "special_need")

    name = (name or "").strip()
    for field, raw in (("name", name), ("age", age), ("weight", weight), ("height", height)):
        if not raw:
            _reject("Please fill all fields", field)

    user_data = UserData(
        name=name,
        age=_parse_int(age, "age"),
        weight=_parse_float(weight, "weight"),
        height=_parse_float(height, "height"),
        gender=_check_option(gender, Gender, "gender"),
        activity_level=_check_option(activity_level, ActivityLevel, "activity_level"),
        special_need=_check_option(special_need, SpecialNeed, "special_need"),
    )
    logger.debug("Form accepted for %s", user_data.name)
    return user_data


__all__ = ["validate_form", "is_selected"]
