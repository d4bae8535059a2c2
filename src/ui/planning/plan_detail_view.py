"""PlanDetailView - the plan screen.

Layout:
- header: plan name, memo, add recipe, complete, delete, back
- recipe selector: one segment per recipe in the plan
- recipe panel: name, description, output/goal, unit cost, scale actions
- editor: parts and ingredient lines of the selected recipe
- lacking ingredients for the whole plan
"""

import logging
import tkinter as tk
from typing import Any, Callable, Optional

import customtkinter as ctk

from src.models.plan import LackingIngredient
from src.services.api_client import ApiClient
from src.services.planning.plan_detail_controller import (
    EVENT_EDITING,
    EVENT_PLAN,
    PlanDetailController,
)
from src.ui.planning.complete_plan_dialog import CompletePlanDialog
from src.ui.planning.ingredient_search_dialog import IngredientSearchDialog
from src.ui.planning.lacking_ingredients_frame import LackingIngredientsFrame, format_quantity
from src.ui.planning.recipe_editor import RecipeEditorFrame
from src.ui.planning.recipe_picker_dialog import RecipePickerDialog
from src.ui.planning.scale_dialog import ScaleDialog
from src.ui.utils.error_handler import make_error_callback
from src.ui.widgets.dialogs import TextInputDialog, show_confirmation
from src.utils.constants import (
    COLOR_HEADER_BG,
    MAX_DESCRIPTION_LENGTH,
    MAX_MEMO_LENGTH,
    PADDING_MEDIUM,
    PADDING_SMALL,
)

logger = logging.getLogger(__name__)


class PlanDetailView(ctk.CTkFrame):
    """Plan detail screen backed by a PlanDetailController."""

    def __init__(
        self,
        parent: Any,
        client: ApiClient,
        plan_id: int,
        on_back: Callable[[], None],
        on_status: Optional[Callable[[str], None]] = None,
        **kwargs
    ):
        """Initialize PlanDetailView.

        Args:
            parent: Parent widget
            client: API client shared by the application
            plan_id: Plan to show
            on_back: Called when the user leaves the plan (back or delete)
            on_status: Called with short status messages
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(parent, **kwargs)

        self.client = client
        self.on_back = on_back
        self._on_status = on_status
        self._recipe_labels: list = []

        self.controller = PlanDetailController(
            client,
            plan_id,
            confirm=lambda title, message: show_confirmation(title, message, parent=self.winfo_toplevel()),
            on_error=make_error_callback(self.winfo_toplevel()),
            notify=self._notify,
        )
        self.controller.add_listener(self._on_controller_event)

        self._setup_ui()
        self.controller.fetch_plan_detail()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)

        # Header
        header = ctk.CTkFrame(self, fg_color=COLOR_HEADER_BG, corner_radius=8)
        header.grid(row=0, column=0, sticky="ew", pady=(0, PADDING_SMALL))
        header.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(header, text="← Plans", width=80, command=self.on_back).grid(
            row=0, column=0, padx=PADDING_MEDIUM, pady=PADDING_MEDIUM
        )
        self.plan_name_label = ctk.CTkLabel(
            header, text="", font=ctk.CTkFont(size=20, weight="bold"), anchor="w"
        )
        self.plan_name_label.grid(row=0, column=1, sticky="ew", padx=PADDING_SMALL)

        self.memo_button = ctk.CTkButton(header, text="Memo", width=80, command=self._edit_memo)
        self.memo_button.grid(row=0, column=2, padx=PADDING_SMALL)
        self.add_recipe_button = ctk.CTkButton(header, text="+ Recipe", width=90, command=self._add_recipe)
        self.add_recipe_button.grid(row=0, column=3, padx=PADDING_SMALL)
        self.complete_button = ctk.CTkButton(header, text="Complete", width=90, command=self._complete)
        self.complete_button.grid(row=0, column=4, padx=PADDING_SMALL)
        ctk.CTkButton(
            header,
            text="Delete",
            width=80,
            fg_color="darkred",
            hover_color="red",
            command=self._delete_plan,
        ).grid(row=0, column=5, padx=(PADDING_SMALL, PADDING_MEDIUM))

        # Recipe selector
        self.recipe_selector = ctk.CTkSegmentedButton(self, values=[], command=self._on_recipe_selected)
        self.recipe_selector.grid(row=1, column=0, sticky="w", pady=PADDING_SMALL)

        # Selected recipe summary
        self.recipe_panel = ctk.CTkFrame(self)
        self.recipe_panel.grid(row=2, column=0, sticky="ew", pady=PADDING_SMALL)
        self._build_recipe_panel(self.recipe_panel)

        # Parts and ingredients
        self.editor = RecipeEditorFrame(self, self.controller, pick_callback=self._pick_ingredient)
        self.editor.grid(row=3, column=0, sticky="nsew", pady=PADDING_SMALL)

        # Shortages
        self.lacking_frame = LackingIngredientsFrame(self, on_replace=self._replace_lacking)
        self.lacking_frame.grid(row=4, column=0, sticky="ew", pady=(PADDING_SMALL, 0))

    def _build_recipe_panel(self, panel: ctk.CTkFrame) -> None:
        panel.grid_columnconfigure(1, weight=1)

        self.recipe_name_label = ctk.CTkLabel(
            panel, text="", font=ctk.CTkFont(size=16, weight="bold"), anchor="w"
        )
        self.recipe_name_label.grid(row=0, column=0, columnspan=2, sticky="w", padx=PADDING_MEDIUM, pady=(PADDING_MEDIUM, 0))

        self.description_label = ctk.CTkLabel(panel, text="", anchor="w", justify="left", wraplength=700)
        self.description_label.grid(row=1, column=0, columnspan=2, sticky="w", padx=PADDING_MEDIUM)

        self.description_button = ctk.CTkButton(panel, text="Edit Description", width=120, command=self._edit_description)
        self.description_button.grid(row=0, column=2, padx=PADDING_SMALL, pady=(PADDING_MEDIUM, 0))

        quantity_row = ctk.CTkFrame(panel, fg_color="transparent")
        quantity_row.grid(row=2, column=0, columnspan=3, sticky="ew", padx=PADDING_MEDIUM, pady=PADDING_SMALL)

        self.output_label = ctk.CTkLabel(quantity_row, text="")
        self.output_label.grid(row=0, column=0, padx=(0, PADDING_MEDIUM))

        ctk.CTkLabel(quantity_row, text="Goal").grid(row=0, column=1)
        self.goal_var = tk.StringVar()
        self.goal_entry = ctk.CTkEntry(quantity_row, textvariable=self.goal_var, width=80)
        self.goal_entry.grid(row=0, column=2, padx=PADDING_SMALL)
        self.goal_entry.bind("<Return>", lambda e: self.controller.update_goal_quantity())
        self.goal_var.trace_add("write", lambda *args: self.controller.set_goal_draft(self.goal_var.get()))
        self.goal_button = ctk.CTkButton(
            quantity_row, text="Apply", width=60, command=self.controller.update_goal_quantity
        )
        self.goal_button.grid(row=0, column=3, padx=PADDING_SMALL)

        self.percent_label = ctk.CTkLabel(quantity_row, text="")
        self.percent_label.grid(row=0, column=4, padx=PADDING_MEDIUM)
        self.cost_label = ctk.CTkLabel(quantity_row, text="")
        self.cost_label.grid(row=0, column=5, padx=PADDING_MEDIUM)

        actions = ctk.CTkFrame(panel, fg_color="transparent")
        actions.grid(row=3, column=0, columnspan=3, sticky="ew", padx=PADDING_MEDIUM, pady=(0, PADDING_MEDIUM))

        self.scale_button = ctk.CTkButton(actions, text="Scale...", width=90, command=self._open_scale_dialog)
        self.scale_button.grid(row=0, column=0, padx=(0, PADDING_SMALL))
        self.save_button = ctk.CTkButton(actions, text="Save Ingredients", width=130, command=self.controller.save_ingredients)
        self.save_button.grid(row=0, column=1, padx=PADDING_SMALL)
        self.reset_button = ctk.CTkButton(actions, text="Reset to Base", width=110, command=self.controller.reset_recipe)
        self.reset_button.grid(row=0, column=2, padx=PADDING_SMALL)
        self.remove_button = ctk.CTkButton(
            actions,
            text="Remove Recipe",
            width=120,
            fg_color="darkred",
            hover_color="red",
            command=self.controller.remove_current_recipe,
        )
        self.remove_button.grid(row=0, column=3, padx=PADDING_SMALL)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_controller_event(self, event: str) -> None:
        if event == EVENT_PLAN:
            self._render_plan()
        if event in (EVENT_PLAN, EVENT_EDITING):
            self._render_recipe()

    def _render_plan(self) -> None:
        plan = self.controller.plan
        if plan is None:
            return

        title = plan.name or f"Plan #{plan.plan_id}"
        if plan.is_complete:
            title += "  (complete)"
        self.plan_name_label.configure(text=title)

        names = [recipe.display_name(plan.is_complete) or f"#{recipe.recipe_id}" for recipe in plan.recipes]
        # Segment labels must be unique
        labels = [f"{i + 1}. {name}" for i, name in enumerate(names)]
        self._recipe_labels = labels
        self.recipe_selector.configure(values=labels)
        if labels:
            self.recipe_selector.set(labels[self.controller.selected_index])

        editable = "disabled" if plan.is_complete else "normal"
        for button in (self.add_recipe_button, self.complete_button):
            button.configure(state=editable)

        self.lacking_frame.set_items(plan.lacking_ingredients, read_only=plan.is_complete)

    def _render_recipe(self) -> None:
        recipe = self.controller.editing
        complete = self.controller.is_complete
        state = "disabled" if complete or recipe is None else "normal"

        for widget in (
            self.description_button,
            self.goal_entry,
            self.goal_button,
            self.scale_button,
            self.save_button,
            self.reset_button,
            self.remove_button,
        ):
            widget.configure(state=state)

        if recipe is None:
            self.recipe_name_label.configure(text="")
            self.description_label.configure(text="")
            self.output_label.configure(text="")
            self.percent_label.configure(text="")
            self.cost_label.configure(text="")
        else:
            self.recipe_name_label.configure(text=recipe.display_name(complete))
            self.description_label.configure(text=recipe.display_description(complete))
            self.output_label.configure(text=f"Base output {format_quantity(float(recipe.output_quantity))}")
            self.goal_var.set(str(self.controller.goal_draft))
            self.percent_label.configure(text=f"{format_quantity(float(recipe.percent))}%")
            self.cost_label.configure(text=f"Unit cost {recipe.unit_cost:,}")

        self.editor.render()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _on_recipe_selected(self, label: str) -> None:
        if label in self._recipe_labels:
            self.controller.select_recipe(self._recipe_labels.index(label))

    def _pick_ingredient(self, part_index: int, line_index: int) -> None:
        line = self.controller.editing.parts[part_index].ingredients[line_index]
        dialog = IngredientSearchDialog(
            self.winfo_toplevel(),
            self.client,
            initial_text=line.ingredient_name,
            on_error=make_error_callback(self.winfo_toplevel()),
        )
        item = dialog.get_result()
        if item is not None:
            self.controller.choose_ingredient(part_index, line_index, item)

    def _replace_lacking(self, target: LackingIngredient) -> None:
        dialog = IngredientSearchDialog(
            self.winfo_toplevel(),
            self.client,
            title="Replace Ingredient",
            prompt=f"Replace '{target.name}' in this recipe with:",
            on_error=make_error_callback(self.winfo_toplevel()),
        )
        item = dialog.get_result()
        if item is not None:
            self.controller.replace_ingredient_everywhere(target, item)

    def _open_scale_dialog(self) -> None:
        if self.controller.editing is None:
            return
        dialog = ScaleDialog(self.winfo_toplevel(), self.controller)
        self.wait_window(dialog)

    def _edit_memo(self) -> None:
        plan = self.controller.plan
        if plan is None:
            return
        dialog = TextInputDialog(
            self.winfo_toplevel(), "Plan Memo", "Memo", plan.memo, max_length=MAX_MEMO_LENGTH
        )
        memo = dialog.get_input()
        if memo is not None:
            self.controller.save_memo(memo)

    def _edit_description(self) -> None:
        recipe = self.controller.editing
        if recipe is None:
            return
        dialog = TextInputDialog(
            self.winfo_toplevel(),
            "Recipe Description",
            "Description",
            recipe.display_description(False),
            max_length=MAX_DESCRIPTION_LENGTH,
        )
        description = dialog.get_input()
        if description is not None:
            self.controller.update_description(description)

    def _add_recipe(self) -> None:
        plan = self.controller.plan
        if plan is None:
            return
        dialog = RecipePickerDialog(
            self.winfo_toplevel(),
            self.client,
            added_recipe_ids=[recipe.recipe_id for recipe in plan.recipes],
            on_error=make_error_callback(self.winfo_toplevel()),
        )
        item = dialog.get_result()
        if item is not None:
            self.controller.add_recipe(item.recipe_id)

    def _complete(self) -> None:
        if not self.controller.check_can_complete():
            return
        dialog = CompletePlanDialog(self.winfo_toplevel(), self.controller)
        self.wait_window(dialog)

    def _delete_plan(self) -> None:
        if self.controller.delete_plan():
            self.on_back()

    def _notify(self, title: str, message: str) -> None:
        logger.info(f"{title}: {message}")
        if self._on_status is not None:
            self._on_status(message)

    def destroy(self) -> None:
        self.controller.remove_listener(self._on_controller_event)
        super().destroy()
