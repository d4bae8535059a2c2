"""
Plan detail controller: the request/refresh cycle behind the plan screen.

The controller holds three pieces of state:
- plan: the last plan successfully fetched from the backend (read-only)
- selected_index: which recipe of the plan is shown
- editing: a structural copy of the selected recipe that the user edits

Edits only change `editing`. Every action that changes the backend ends
by fetching the plan again; the fresh plan replaces `plan` and a new
editing copy is taken from it. Nothing is merged locally, and a failed
request leaves all three untouched.

Destructive actions (reset, remove recipe, delete plan) ask confirm()
first. Errors are passed to on_error(exception, operation) and successes
to notify(title, message), so the controller runs without any UI.

Listeners registered with add_listener() receive one of:
    EVENT_PLAN     a new plan was fetched (editing was rebuilt too)
    EVENT_EDITING  the editing copy changed structure
    EVENT_FIELD    a single field changed while typing
"""

import logging
from typing import Any, Callable, List, Optional

from src.models.catalog import IngredientSearchItem
from src.models.plan import LackingIngredient, PlanDetail, PlanRecipe
from src.services import plan_service
from src.services.api_client import ApiClient
from src.services.exceptions import PlanCompleteError, ServiceError, ValidationError
from src.services.logging_utils import get_service_logger, log_operation
from src.services.planning import completion, edit_model
from src.services.planning.scale_preview import (
    validate_overall_percent,
    validate_part_percents,
)
from src.services.planning.submission import (
    validate_goal_quantity,
    validate_ingredients_for_submit,
)

logger = get_service_logger(__name__)

EVENT_PLAN = "plan"
EVENT_EDITING = "editing"
EVENT_FIELD = "field"

ConfirmCallback = Callable[[str, str], bool]
ErrorCallback = Callable[[Exception, str], Any]
NotifyCallback = Callable[[str, str], Any]


def _log_only(exception: Exception, operation: str) -> None:
    logger.warning(f"{operation} failed: {exception}")


class PlanDetailController:
    """
    State and actions for one plan's detail screen.

    Attributes:
        plan_id: Backend plan ID
        plan: Last fetched plan, or None before the first successful fetch
        selected_index: Index of the shown recipe within plan.recipes
        editing: Editable copy of the selected recipe (None if the plan is empty)
        goal_draft: Goal quantity text shown in the goal field
        saving: True while an ingredient save request is outstanding
        completing: True while a completion request is outstanding
    """

    def __init__(
        self,
        client: ApiClient,
        plan_id: int,
        confirm: ConfirmCallback,
        on_error: Optional[ErrorCallback] = None,
        notify: Optional[NotifyCallback] = None,
    ):
        self._client = client
        self.plan_id = plan_id
        self._confirm = confirm
        self._on_error = on_error or _log_only
        self._notify = notify

        self.plan: Optional[PlanDetail] = None
        self.selected_index: int = 0
        self.editing: Optional[PlanRecipe] = None
        self.goal_draft: Any = ""

        self.saving = False
        self.completing = False
        self._auto_submit_pending = False
        self._listeners: List[Callable[[str], None]] = []

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def add_listener(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[str], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event)

    @property
    def selected_recipe(self) -> Optional[PlanRecipe]:
        """The selected recipe as last fetched (not the editing copy)."""
        if self.plan is None or not self.plan.recipes:
            return None
        if 0 <= self.selected_index < len(self.plan.recipes):
            return self.plan.recipes[self.selected_index]
        return None

    @property
    def is_complete(self) -> bool:
        return self.plan is not None and self.plan.is_complete

    # ------------------------------------------------------------------
    # Fetch / refresh cycle
    # ------------------------------------------------------------------

    def fetch_plan_detail(self, keep_selection: bool = True) -> bool:
        """
        Load the plan from the backend and rebuild the editing copy.

        The selected recipe is kept across refreshes; if it is gone (or
        keep_selection is False) the first recipe is selected. On failure
        the previous state is kept.

        Returns:
            True if the plan was loaded
        """
        try:
            plan = plan_service.get_plan_detail(self._client, self.plan_id)
        except ServiceError as e:
            self._report(e, "Load plan")
            return False

        previous = self.selected_recipe if keep_selection else None
        self.plan = plan
        index = plan.find_recipe_index(previous.recipe_id) if previous is not None else None
        self.selected_index = index if index is not None else 0

        log_operation(
            logger,
            operation="fetch_plan_detail",
            outcome="success",
            level=logging.DEBUG,
            plan_id=self.plan_id,
            recipe_count=len(plan.recipes),
        )
        self._rebuild_editing(EVENT_PLAN)
        return True

    def select_recipe(self, index: int) -> None:
        """Show another recipe of the plan; unsaved edits are discarded."""
        if self.plan is None or not 0 <= index < len(self.plan.recipes):
            return
        if index == self.selected_index and self.editing is not None:
            return
        self.selected_index = index
        self._rebuild_editing(EVENT_EDITING)

    def _rebuild_editing(self, event: str) -> None:
        recipe = self.selected_recipe
        self.editing = recipe.clone() if recipe is not None else None
        self.goal_draft = recipe.goal_quantity if recipe is not None else ""
        self._publish(event)

    def _publish(self, event: str) -> None:
        """Tell listeners about the new state, then run a pending auto-submit."""
        self._emit(event)
        if self._auto_submit_pending:
            self._auto_submit_pending = False
            self.save_ingredients()

    # ------------------------------------------------------------------
    # Editing-session mutations (local only)
    # ------------------------------------------------------------------

    def _edit(self, operation: str, fn: Callable[..., PlanRecipe], *args: Any,
              event: str = EVENT_EDITING) -> bool:
        if self.editing is None:
            return False
        try:
            self._ensure_editable(operation)
            updated = fn(self.editing, *args)
        except ValidationError as e:
            self._report(e, operation)
            return False
        if updated is self.editing:
            return False
        self.editing = updated
        self._publish(event)
        return True

    def add_part(self) -> bool:
        return self._edit("Add part", edit_model.add_part)

    def remove_part(self, part_index: int) -> bool:
        return self._edit("Remove part", edit_model.remove_part, part_index, self._confirm)

    def rename_part(self, part_index: int, new_name: str) -> bool:
        return self._edit(
            "Rename part", edit_model.rename_part, part_index, new_name, event=EVENT_FIELD
        )

    def add_ingredient(self, part_index: int) -> bool:
        return self._edit("Add ingredient", edit_model.add_ingredient, part_index)

    def remove_ingredient(self, part_index: int, line_index: int) -> bool:
        return self._edit(
            "Remove ingredient",
            edit_model.remove_ingredient,
            part_index,
            line_index,
            self._confirm,
        )

    def reorder_ingredient(
        self,
        part_index: int,
        from_index: int,
        to_index: int,
        target_part_index: Optional[int] = None,
    ) -> bool:
        return self._edit(
            "Move ingredient",
            edit_model.reorder_ingredient,
            part_index,
            from_index,
            to_index,
            target_part_index,
        )

    def set_ingredient_field(
        self, part_index: int, line_index: int, field_name: str, value: Any
    ) -> bool:
        return self._edit(
            "Edit ingredient",
            edit_model.set_ingredient_field,
            part_index,
            line_index,
            field_name,
            value,
            event=EVENT_FIELD,
        )

    def choose_ingredient(
        self, part_index: int, line_index: int, item: IngredientSearchItem
    ) -> bool:
        return self._edit(
            "Choose ingredient",
            edit_model.choose_ingredient,
            part_index,
            line_index,
            item.ingredient_id,
            item.name,
        )

    def set_goal_draft(self, value: Any) -> None:
        self.goal_draft = value

    def replace_ingredient_everywhere(
        self, target: LackingIngredient, replacement: IngredientSearchItem
    ) -> bool:
        """
        Swap a lacking ingredient for another across the editing recipe,
        then save automatically once the new session is published.

        Returns:
            True if any line was replaced
        """
        if self.editing is None:
            return False
        try:
            self._ensure_editable("Replace ingredient")
        except ValidationError as e:
            self._report(e, "Replace ingredient")
            return False

        updated, count = edit_model.replace_ingredient_everywhere(
            self.editing,
            target.ingredient_id,
            target.name,
            replacement.ingredient_id,
            replacement.name,
        )
        log_operation(
            logger,
            operation="replace_ingredient_everywhere",
            outcome="replaced" if count else "no_match",
            plan_id=self.plan_id,
            recipe_id=self.editing.recipe_id,
            replaced=count,
        )
        if count == 0:
            self._success("Replace Ingredient", f"'{target.name}' is not used in this recipe.")
            return False

        self.editing = updated
        self._auto_submit_pending = True
        self._publish(EVENT_EDITING)
        return True

    # ------------------------------------------------------------------
    # Save / submit
    # ------------------------------------------------------------------

    def save_ingredients(self) -> bool:
        """
        Validate the editing copy and send its parts and lines.

        A no-op while a previous save is still outstanding.

        Returns:
            True if the backend accepted the save
        """
        if self.saving or self.editing is None:
            return False

        try:
            self._ensure_editable("Save ingredients")
            validate_ingredients_for_submit(self.editing)
        except ValidationError as e:
            log_operation(
                logger,
                operation="save_ingredients",
                outcome="validation_failed",
                level=logging.WARNING,
                plan_id=self.plan_id,
                error=str(e),
            )
            self._report(e, "Save ingredients")
            return False

        self.saving = True
        try:
            plan_service.update_ingredients(self._client, self.plan_id, self.editing)
        except ServiceError as e:
            self._report(e, "Save ingredients")
            return False
        finally:
            self.saving = False

        self._success("Saved", "Ingredients saved.")
        self.fetch_plan_detail()
        return True

    def _request(self, operation: str, call: Callable[[], Any], success: Optional[str]) -> bool:
        """Run one backend request, report its outcome, then refresh."""
        try:
            call()
        except ServiceError as e:
            self._report(e, operation)
            return False
        log_operation(logger, operation=operation, outcome="success", plan_id=self.plan_id)
        if success:
            self._success(operation, success)
        self.fetch_plan_detail()
        return True

    def _recipe_action_guard(self, operation: str) -> Optional[PlanRecipe]:
        if self.editing is None:
            return None
        try:
            self._ensure_editable(operation)
        except ValidationError as e:
            self._report(e, operation)
            return None
        return self.editing

    def update_goal_quantity(self, raw: Any = None) -> bool:
        """Set the selected recipe's goal quantity (defaults to goal_draft)."""
        recipe = self._recipe_action_guard("Change goal quantity")
        if recipe is None:
            return False
        try:
            goal = validate_goal_quantity(self.goal_draft if raw is None else raw)
        except ValidationError as e:
            self._report(e, "Change goal quantity")
            return False
        return self._request(
            "Change goal quantity",
            lambda: plan_service.update_goal_quantity(
                self._client, self.plan_id, recipe.recipe_id, goal
            ),
            "Goal quantity updated.",
        )

    def apply_overall_percent(self, raw: Any) -> bool:
        """Scale the selected recipe by an overall percent (sent as entered)."""
        recipe = self._recipe_action_guard("Change scale")
        if recipe is None:
            return False
        try:
            percent = validate_overall_percent(raw)
        except ValidationError as e:
            self._report(e, "Change scale")
            return False
        return self._request(
            "Change scale",
            lambda: plan_service.update_overall_percent(
                self._client, self.plan_id, recipe.recipe_id, percent
            ),
            "Scale updated.",
        )

    def apply_part_percents(self, percents: List[Optional[float]]) -> bool:
        """Send one percent per part; incomplete input is rejected locally."""
        recipe = self._recipe_action_guard("Change part scale")
        if recipe is None:
            return False
        try:
            values = validate_part_percents(percents, len(recipe.parts))
        except ValidationError as e:
            self._report(e, "Change part scale")
            return False
        return self._request(
            "Change part scale",
            lambda: plan_service.update_part_percents(
                self._client, self.plan_id, recipe.recipe_id, recipe.parts, values
            ),
            "Part scales updated.",
        )

    def reset_recipe(self) -> bool:
        """Revert the selected recipe to its base recipe after confirmation."""
        recipe = self._recipe_action_guard("Reset recipe")
        if recipe is None:
            return False
        if not self._confirm("Reset Recipe", "Reset this recipe to the base recipe?"):
            return False
        return self._request(
            "Reset recipe",
            lambda: plan_service.reset_recipe(self._client, self.plan_id, recipe.recipe_id),
            "Recipe reset to the base recipe.",
        )

    def update_description(self, description: str) -> bool:
        recipe = self._recipe_action_guard("Update description")
        if recipe is None:
            return False
        return self._request(
            "Update description",
            lambda: plan_service.update_description(
                self._client, self.plan_id, recipe.recipe_id, description
            ),
            None,
        )

    def remove_current_recipe(self) -> bool:
        """Detach the selected recipe from the plan after confirmation."""
        recipe = self._recipe_action_guard("Remove recipe")
        if recipe is None:
            return False
        confirmed = self._confirm(
            "Remove Recipe",
            "Removing this recipe from the plan discards its changes for good.\n\n"
            "Remove it anyway?",
        )
        if not confirmed:
            return False
        try:
            plan_service.remove_recipe(self._client, self.plan_id, recipe.recipe_id)
        except ServiceError as e:
            self._report(e, "Remove recipe")
            return False
        self._success("Remove Recipe", "Recipe removed from the plan.")
        self.fetch_plan_detail(keep_selection=False)
        return True

    def add_recipe(self, recipe_id: int) -> bool:
        """Attach a recipe to the plan."""
        if self.plan is None:
            return False
        try:
            self._ensure_editable("Add recipe")
            if self.plan.contains_recipe(recipe_id):
                raise ValidationError(["This recipe is already in the plan."])
        except ValidationError as e:
            self._report(e, "Add recipe")
            return False
        return self._request(
            "Add recipe",
            lambda: plan_service.add_recipe(self._client, self.plan_id, recipe_id),
            "Recipe added to the plan.",
        )

    def save_memo(self, memo: str) -> bool:
        if self.plan is None:
            return False
        return self._request(
            "Save memo",
            lambda: plan_service.update_memo(self._client, self.plan_id, memo),
            "Memo saved.",
        )

    def delete_plan(self) -> bool:
        """
        Delete the whole plan after confirmation.

        Returns:
            True if deleted; the caller leaves the plan screen
        """
        confirmed = self._confirm(
            "Delete Plan", "Delete this plan? Deleted plans cannot be recovered."
        )
        if not confirmed:
            return False
        try:
            plan_service.delete_plan(self._client, self.plan_id)
        except ServiceError as e:
            self._report(e, "Delete plan")
            return False
        self._success("Delete Plan", "Plan deleted.")
        return True

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def check_can_complete(self) -> bool:
        """True if the completion form may be opened; reports why not otherwise."""
        if self.plan is None:
            return False
        try:
            self._ensure_editable("Complete plan")
            completion.ensure_can_complete(self.plan)
        except ValidationError as e:
            self._report(e, "Complete plan")
            return False
        return True

    def complete_plan(self, renames: List[completion.RecipeRename]) -> bool:
        """Validate final recipe names and complete the plan."""
        if self.completing or not self.check_can_complete():
            return False
        try:
            cleaned = completion.validate_renames(self.plan, renames)
        except ValidationError as e:
            self._report(e, "Complete plan")
            return False

        self.completing = True
        try:
            plan_service.complete_plan(
                self._client, self.plan_id, [rename.to_payload() for rename in cleaned]
            )
        except ServiceError as e:
            self._report(e, "Complete plan")
            return False
        finally:
            self.completing = False

        self._success("Complete Plan", "Plan completed.")
        self.fetch_plan_detail()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_editable(self, operation: str) -> None:
        if self.is_complete:
            raise PlanCompleteError(self.plan_id, operation.lower())

    def _report(self, exception: Exception, operation: str) -> None:
        self._on_error(exception, operation)

    def _success(self, title: str, message: str) -> None:
        if self._notify is not None:
            self._notify(title, message)
