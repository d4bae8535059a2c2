"""
Planning services for scaling plan recipes and reconciling shortages.

This module provides:
- Quantity math between a recipe's base output, goal quantity and percent
- A debounced scale preview for the scaling dialog
- The edit model for a plan recipe's parts and ingredient lines
- Pre-submit validation for ingredient saves and goal quantities
- Plan completion rules for temporary recipes
- The plan detail controller tying these to the backend refresh cycle

Usage:
    from src.services.planning import (
        PlanDetailController,
        ScalePreviewController,
        percent_from_quantities,
        quantity_from_percent,
    )
"""

from .quantity_math import (
    round_half_up,
    percent_from_quantities,
    quantity_from_percent,
)

from .scale_preview import (
    Scheduler,
    ScalePreviewController,
    is_valid_percent,
    validate_overall_percent,
    validate_part_percents,
)

from .edit_model import (
    EDITABLE_LINE_FIELDS,
    add_part,
    remove_part,
    rename_part,
    add_ingredient,
    remove_ingredient,
    reorder_ingredient,
    set_ingredient_field,
    choose_ingredient,
    replace_ingredient_everywhere,
    new_ingredient_line,
    next_temp_id,
)

from .submission import (
    validate_ingredients_for_submit,
    validate_goal_quantity,
)

from .completion import (
    RecipeRename,
    temporary_recipes,
    initial_renames,
    ensure_can_complete,
    validate_renames,
)

from .plan_detail_controller import (
    EVENT_EDITING,
    EVENT_FIELD,
    EVENT_PLAN,
    PlanDetailController,
)

__all__ = [
    # Quantity math
    "round_half_up",
    "percent_from_quantities",
    "quantity_from_percent",
    # Scale preview
    "Scheduler",
    "ScalePreviewController",
    "is_valid_percent",
    "validate_overall_percent",
    "validate_part_percents",
    # Edit model
    "EDITABLE_LINE_FIELDS",
    "add_part",
    "remove_part",
    "rename_part",
    "add_ingredient",
    "remove_ingredient",
    "reorder_ingredient",
    "set_ingredient_field",
    "choose_ingredient",
    "replace_ingredient_everywhere",
    "new_ingredient_line",
    "next_temp_id",
    # Submission
    "validate_ingredients_for_submit",
    "validate_goal_quantity",
    # Completion
    "RecipeRename",
    "temporary_recipes",
    "initial_renames",
    "ensure_can_complete",
    "validate_renames",
    # Plan detail
    "EVENT_EDITING",
    "EVENT_FIELD",
    "EVENT_PLAN",
    "PlanDetailController",
]
