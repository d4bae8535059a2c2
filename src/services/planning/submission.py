"""
Pre-submit validation for plan edits.

Validation runs before any request is made. The first violation aborts
the whole submission with one user-facing message; nothing is sent
partially.
"""

from typing import Any

from src.models.plan import PlanRecipe
from src.services.exceptions import ValidationError
from src.utils.constants import (
    ERROR_INGREDIENTS_INCOMPLETE,
    ERROR_INVALID_GOAL_QUANTITY,
    ERROR_QUANTITY_NOT_NUMERIC,
)
from src.utils.validators import (
    is_numeric,
    parse_number,
    validate_positive_number,
    validate_required_string,
    validate_unit,
    whole_to_int,
)


def validate_ingredients_for_submit(recipe: PlanRecipe) -> None:
    """
    Check every ingredient line of every part.

    Each line needs a non-empty name, a non-empty numeric quantity and a
    unit.

    Raises:
        ValidationError: On the first line that fails
    """
    for part in recipe.parts:
        for line in part.ingredients:
            quantity = line.customized_quantity
            blank_quantity = quantity is None or (isinstance(quantity, str) and quantity.strip() == "")
            name_ok, _ = validate_required_string(line.ingredient_name)
            unit_ok, _ = validate_unit(line.unit)
            if not name_ok or blank_quantity or not unit_ok:
                raise ValidationError([ERROR_INGREDIENTS_INCOMPLETE])
            if not is_numeric(quantity):
                raise ValidationError([ERROR_QUANTITY_NOT_NUMERIC])


def validate_goal_quantity(raw: Any) -> float:
    """
    Parse a goal quantity typed by the user.

    Returns:
        The goal as a number (int when whole)

    Raises:
        ValidationError: If the value is not a number greater than zero
    """
    is_valid, _ = validate_positive_number(raw, "Goal quantity")
    if not is_valid:
        raise ValidationError([ERROR_INVALID_GOAL_QUANTITY])
    return whole_to_int(parse_number(raw))
