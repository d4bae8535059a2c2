"""
Plan completion rules.

A plan can be completed only when nothing is lacking in stock. Recipes
that exist only inside the plan (temporary recipes) become real recipes
on completion, so each needs a final name and description:
- name and description must not be blank
- the name must differ from every recipe name already in the plan
- the new names must be unique among themselves
"""

from dataclasses import dataclass
from typing import Dict, List

from src.models.plan import PlanDetail, PlanRecipe
from src.services.exceptions import ValidationError
from src.utils.constants import ERROR_PLAN_HAS_LACKING
from src.utils.validators import sanitize_string


@dataclass
class RecipeRename:
    """Final name and description chosen for a temporary recipe."""

    recipe_id: int
    new_name: str
    new_description: str

    def to_payload(self) -> Dict[str, object]:
        return {
            "recipeId": self.recipe_id,
            "newName": self.new_name,
            "newDescription": self.new_description,
        }


def temporary_recipes(plan: PlanDetail) -> List[PlanRecipe]:
    """Recipes that must be named before the plan is completed."""
    return [recipe for recipe in plan.recipes if recipe.is_temp]


def initial_renames(plan: PlanDetail) -> List[RecipeRename]:
    """Starting values for the completion form: the current names."""
    return [
        RecipeRename(recipe.recipe_id, recipe.name, recipe.description)
        for recipe in temporary_recipes(plan)
    ]


def ensure_can_complete(plan: PlanDetail) -> None:
    """
    Raises:
        ValidationError: If the plan still has lacking ingredients
    """
    if plan.has_lacking_ingredients:
        raise ValidationError([ERROR_PLAN_HAS_LACKING])


def validate_renames(plan: PlanDetail, renames: List[RecipeRename]) -> List[RecipeRename]:
    """
    Validate the completion form.

    Returns:
        The renames with names and descriptions stripped

    Raises:
        ValidationError: On the first rule that fails
    """
    existing_names = {recipe.name for recipe in plan.recipes}
    cleaned: List[RecipeRename] = []

    for rename in renames:
        name = sanitize_string(rename.new_name)
        description = sanitize_string(rename.new_description)
        if not name or not description:
            raise ValidationError(["Every recipe needs a name and a description."])
        if name in existing_names:
            raise ValidationError([f"{name}: choose a new recipe name."])
        cleaned.append(RecipeRename(rename.recipe_id, name, description))

    names = [rename.new_name for rename in cleaned]
    if len(set(names)) != len(names):
        raise ValidationError(["Recipe names must be unique."])

    return cleaned
