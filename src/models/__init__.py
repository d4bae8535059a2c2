"""
Models package.

This package contains the dataclasses that mirror the bakery backend's
responses and the client's in-memory editing state.
"""

from .plan import (
    IngredientLine,
    Part,
    PlanRecipe,
    LackingIngredient,
    PlanDetail,
    ingredients_payload,
    part_percents_payload,
)
from .catalog import PlanSummary, PlanPage, RecipeSearchItem, IngredientSearchItem
from .user import User

__all__ = [
    "IngredientLine",
    "Part",
    "PlanRecipe",
    "LackingIngredient",
    "PlanDetail",
    "ingredients_payload",
    "part_percents_payload",
    "PlanSummary",
    "PlanPage",
    "RecipeSearchItem",
    "IngredientSearchItem",
    "User",
]
