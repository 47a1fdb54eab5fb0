"""Command-line entry point for the calorie calculator.

Reads the form fields from arguments, validates them, prints the greeting
with the daily calorie estimate and, with --diet-plan, the matching plan.

    python main.py --name Alex --age 30 --weight 70 --height 175 \\
        --gender Male --activity "Moderately Active" --goal "Weight Loss" --diet-plan
"""

import argparse
import sys
from typing import List, Optional

from core.error_handlers import EXIT_OK, run_with_error_handling
from core.logger import configure_logging, get_logger
from schemas.user_schema import ActivityLevel, Gender, SpecialNeed
from services.calorie_calculator import calorie_calculator
from services.diet_plan_selector import diet_plan_selector
from services.form_validator import validate_form

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("macromind", description="Estimate daily calorie needs")
    p.add_argument("--name")
    p.add_argument("--age", help="Age in years")
    p.add_argument("--weight", help="Weight in kilograms")
    p.add_argument("--height", help="Height in centimeters")
    p.add_argument("--gender", help=", ".join(g.value for g in Gender))
    p.add_argument("--activity", dest="activity_level", help=", ".join(a.value for a in ActivityLevel))
    p.add_argument("--goal", dest="special_need", help=", ".join(s.value for s in SpecialNeed))
    p.add_argument("--diet-plan", action="store_true", help="Also print the diet plan for the result")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Run one calculation; returns the process exit status."""
    args = build_parser().parse_args(argv)

    def command() -> int:
        configure_logging()
        user_data = validate_form(
            name=args.name,
            age=args.age,
            weight=args.weight,
            height=args.height,
            gender=args.gender,
            activity_level=args.activity_level,
            special_need=args.special_need,
        )
        result = calorie_calculator.calculate(user_data)
        logger.info("Calculated %.2f kcal/day for %s", result.calories, user_data.name)
        print(result.message)
        if args.diet_plan:
            print()
            print(diet_plan_selector.select_plan(result.calories))
        return EXIT_OK

    return run_with_error_handling(command)


if __name__ == "__main__":
    sys.exit(main())
