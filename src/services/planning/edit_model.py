"""
Edit model for one plan recipe's parts and ingredient lines.

The editing session is a structural copy of a plan recipe
(PlanRecipe.clone()). The functions here never modify their input: each
returns a new PlanRecipe, sharing only the parts and lines it did not
change, so observers can compare sessions by identity. Nothing is sent to
the backend until the session is saved.

Structure rules enforced here:
- A recipe keeps at least one part; a part keeps at least one line.
- Ingredient lines are reordered within their own part only.

Removal of a part that still holds named ingredients, and removal of any
ingredient line, goes through a confirm(title, message) callable; a
declined confirmation returns the recipe unchanged.
"""

import itertools
from dataclasses import replace
from typing import Any, Callable, List, Optional, Tuple

from src.models.plan import IngredientLine, Part, PlanRecipe
from src.services.exceptions import EditRejected
from src.utils.constants import (
    DEFAULT_PERCENT,
    DEFAULT_UNIT,
    ERROR_CROSS_PART_MOVE,
    ERROR_LAST_INGREDIENT,
    ERROR_LAST_PART,
    ERROR_MOVE_OUT_OF_RANGE,
)

ConfirmCallback = Callable[[str, str], bool]

EDITABLE_LINE_FIELDS = ("ingredient_name", "customized_quantity", "unit", "ingredient_id")

# Temporary IDs for lines added in the editor. Negative so they never
# collide with backend IDs; the backend matches ingredients by name.
_temp_ids = itertools.count(start=-1, step=-1)


def next_temp_id() -> int:
    """Return a session-unique temporary ingredient ID."""
    return next(_temp_ids)


def new_ingredient_line() -> IngredientLine:
    """A blank ingredient line with a fresh temporary ID."""
    return IngredientLine(
        ingredient_id=next_temp_id(),
        ingredient_name="",
        unit=DEFAULT_UNIT,
        original_quantity=0,
        customized_quantity="",
    )


def _with_parts(recipe: PlanRecipe, parts: List[Part]) -> PlanRecipe:
    return replace(recipe, parts=parts)


def _with_part(recipe: PlanRecipe, part_index: int, part: Part) -> PlanRecipe:
    parts = list(recipe.parts)
    parts[part_index] = part
    return _with_parts(recipe, parts)


# =============================================================================
# Parts
# =============================================================================


def add_part(recipe: PlanRecipe) -> PlanRecipe:
    """Append an unnamed part at 100% holding one blank ingredient line."""
    part = Part(part_name="", percent=DEFAULT_PERCENT, ingredients=[new_ingredient_line()])
    return _with_parts(recipe, [*recipe.parts, part])


def remove_part(recipe: PlanRecipe, part_index: int, confirm: ConfirmCallback) -> PlanRecipe:
    """
    Remove a part.

    Args:
        recipe: Current editing session
        part_index: Part to remove
        confirm: Asked before removing a part that holds named ingredients

    Returns:
        The new session, or recipe itself if the user declined

    Raises:
        EditRejected: If this is the recipe's only part
    """
    if len(recipe.parts) <= 1:
        raise EditRejected(ERROR_LAST_PART)

    part = recipe.parts[part_index]
    if part.has_named_ingredient:
        confirmed = confirm(
            "Remove Part",
            "This part still contains ingredients.\n\n"
            "Removing it removes its ingredients too.\n\n"
            "Remove it anyway?",
        )
        if not confirmed:
            return recipe

    parts = [p for i, p in enumerate(recipe.parts) if i != part_index]
    return _with_parts(recipe, parts)


def rename_part(recipe: PlanRecipe, part_index: int, new_name: str) -> PlanRecipe:
    """Set a part's name. Not validated until save."""
    part = replace(recipe.parts[part_index], part_name=new_name)
    return _with_part(recipe, part_index, part)


# =============================================================================
# Ingredient lines
# =============================================================================


def add_ingredient(recipe: PlanRecipe, part_index: int) -> PlanRecipe:
    """Append a blank ingredient line to a part."""
    part = recipe.parts[part_index]
    new_part = replace(part, ingredients=[*part.ingredients, new_ingredient_line()])
    return _with_part(recipe, part_index, new_part)


def remove_ingredient(
    recipe: PlanRecipe,
    part_index: int,
    line_index: int,
    confirm: ConfirmCallback,
) -> PlanRecipe:
    """
    Remove an ingredient line after confirmation.

    Returns:
        The new session, or recipe itself if the user declined

    Raises:
        EditRejected: If this is the part's only line
    """
    part = recipe.parts[part_index]
    if len(part.ingredients) <= 1:
        raise EditRejected(ERROR_LAST_INGREDIENT)

    confirmed = confirm(
        "Remove Ingredient",
        "Remove this ingredient?\nThis cannot be undone once saved.",
    )
    if not confirmed:
        return recipe

    lines = [line for i, line in enumerate(part.ingredients) if i != line_index]
    return _with_part(recipe, part_index, replace(part, ingredients=lines))


def reorder_ingredient(
    recipe: PlanRecipe,
    part_index: int,
    from_index: int,
    to_index: int,
    target_part_index: Optional[int] = None,
) -> PlanRecipe:
    """
    Move an ingredient line to a new position within its part.

    Args:
        recipe: Current editing session
        part_index: Part the line is dragged from
        from_index: Current position of the line
        to_index: Position to drop it at
        target_part_index: Part it was dropped on (defaults to part_index)

    Raises:
        EditRejected: If target_part_index names a different part, or
            either position is outside the part
    """
    if target_part_index is not None and target_part_index != part_index:
        raise EditRejected(ERROR_CROSS_PART_MOVE)

    if not 0 <= part_index < len(recipe.parts):
        raise EditRejected(ERROR_MOVE_OUT_OF_RANGE)
    part = recipe.parts[part_index]
    lines = list(part.ingredients)
    if not (0 <= from_index < len(lines) and 0 <= to_index < len(lines)):
        raise EditRejected(ERROR_MOVE_OUT_OF_RANGE)
    moved = lines.pop(from_index)
    lines.insert(to_index, moved)
    return _with_part(recipe, part_index, replace(part, ingredients=lines))


def set_ingredient_field(
    recipe: PlanRecipe,
    part_index: int,
    line_index: int,
    field_name: str,
    value: Any,
) -> PlanRecipe:
    """
    Set one field of an ingredient line. Not validated until save.

    Raises:
        ValueError: If field_name is not an editable line field
    """
    if field_name not in EDITABLE_LINE_FIELDS:
        raise ValueError(f"Ingredient line field '{field_name}' is not editable")

    part = recipe.parts[part_index]
    lines = list(part.ingredients)
    lines[line_index] = replace(lines[line_index], **{field_name: value})
    return _with_part(recipe, part_index, replace(part, ingredients=lines))


def choose_ingredient(
    recipe: PlanRecipe,
    part_index: int,
    line_index: int,
    ingredient_id: Optional[int],
    ingredient_name: str,
) -> PlanRecipe:
    """Point a line at an ingredient picked from the ingredient search."""
    part = recipe.parts[part_index]
    lines = list(part.ingredients)
    lines[line_index] = replace(
        lines[line_index],
        ingredient_id=ingredient_id if ingredient_id is not None else next_temp_id(),
        ingredient_name=ingredient_name,
    )
    return _with_part(recipe, part_index, replace(part, ingredients=lines))


def replace_ingredient_everywhere(
    recipe: PlanRecipe,
    target_id: Optional[int],
    target_name: str,
    new_id: Optional[int],
    new_name: str,
) -> Tuple[PlanRecipe, int]:
    """
    Swap one ingredient for another in every part of the recipe.

    A line matches when its ID equals target_id (if the target has one)
    or its name equals target_name.

    Returns:
        (new session, number of lines replaced); the session is recipe
        itself when nothing matched
    """
    target_name = (target_name or "").strip()
    replaced = 0
    parts: List[Part] = []

    for part in recipe.parts:
        lines: List[IngredientLine] = []
        changed = False
        for line in part.ingredients:
            id_match = target_id is not None and line.ingredient_id == target_id
            name_match = bool(target_name) and line.ingredient_name.strip() == target_name
            if id_match or name_match:
                lines.append(replace(line, ingredient_id=new_id, ingredient_name=new_name))
                replaced += 1
                changed = True
            else:
                lines.append(line)
        parts.append(replace(part, ingredients=lines) if changed else part)

    if replaced == 0:
        return recipe, 0
    return _with_parts(recipe, parts), replaced
