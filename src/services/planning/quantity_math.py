"""
Quantity math for recipe scaling.

This module provides pure functions for:
- Deriving a recipe's scale percent from its base output and goal quantity
- Deriving a goal quantity from a base output and a percent

Both round half up to whole numbers, the rounding shown in the plan
screens. Callers validate percent input before calling
quantity_from_percent(); see scale_preview.is_valid_percent().
"""

import math

from src.utils.constants import DEFAULT_PERCENT


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.4999)
        2
    """
    return math.floor(value + 0.5)


def percent_from_quantities(base: float, goal: float) -> int:
    """Calculate the scale percent of goal relative to base.

    Transaction boundary: Pure computation (no backend access).

    Args:
        base: Base output quantity of the recipe
        goal: Goal quantity for the plan

    Returns:
        round(goal / base * 100), or 100 when base is not positive

    Examples:
        >>> percent_from_quantities(50, 100)
        200
        >>> percent_from_quantities(0, 100)
        100
    """
    if base > 0:
        return round_half_up(goal / base * 100)
    return DEFAULT_PERCENT


def quantity_from_percent(base: float, percent: float) -> int:
    """Calculate the goal quantity for base scaled by percent.

    Transaction boundary: Pure computation (no backend access).

    Args:
        base: Base output quantity of the recipe
        percent: Scale percent; must be a positive number

    Returns:
        round(base * percent / 100)

    Examples:
        >>> quantity_from_percent(100, 120)
        120
        >>> quantity_from_percent(30, 150)
        45
    """
    return round_half_up(base * percent / 100)
