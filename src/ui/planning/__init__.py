"""Planning UI module for bakery plans.

This module provides UI components for working on a plan:
- PlanListView: Paged list of plans with plan creation
- PlanDetailView: Plan screen with recipe selection, editing and shortages
- RecipeEditorFrame: Parts and ingredient lines of the selected recipe
- LackingIngredientsFrame: Shortage table with replace and shop actions
- Dialogs: scaling, ingredient search, recipe picking, completion, PIN login

Usage:
    from src.ui.planning import PlanDetailView

    view = PlanDetailView(parent, client, plan_id=7, on_back=show_list)
    view.pack(fill="both", expand=True)
"""

from .plan_list_view import PlanListView, PlanRow
from .plan_detail_view import PlanDetailView
from .recipe_editor import RecipeEditorFrame, PartSection, IngredientLineRow
from .lacking_ingredients_frame import LackingIngredientsFrame, LackingIngredientRow
from .scale_dialog import ScaleDialog
from .ingredient_search_dialog import IngredientSearchDialog
from .recipe_picker_dialog import RecipePickerDialog, CreatePlanDialog
from .complete_plan_dialog import CompletePlanDialog
from .pin_login_dialog import PinLoginDialog

__all__ = [
    "PlanListView",
    "PlanRow",
    "PlanDetailView",
    "RecipeEditorFrame",
    "PartSection",
    "IngredientLineRow",
    "LackingIngredientsFrame",
    "LackingIngredientRow",
    "ScaleDialog",
    "IngredientSearchDialog",
    "RecipePickerDialog",
    "CreatePlanDialog",
    "CompletePlanDialog",
    "PinLoginDialog",
]
