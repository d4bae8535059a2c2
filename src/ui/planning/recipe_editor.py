"""
Recipe editor for the selected plan recipe.

Renders the controller's editing copy as one section per part, each with
its ingredient lines. Widgets write straight into the controller; the
frame re-renders on structural changes only, so typing keeps focus.
"""

import tkinter as tk
from typing import Any, Callable, List

import customtkinter as ctk

from src.models.plan import IngredientLine, Part
from src.services.planning.plan_detail_controller import PlanDetailController
from src.ui.planning.lacking_ingredients_frame import format_quantity
from src.utils.constants import PADDING_MEDIUM, PADDING_SMALL, RECIPE_UNITS


class IngredientLineRow(ctk.CTkFrame):
    """Row widget for a single ingredient line."""

    def __init__(
        self,
        parent,
        controller: PlanDetailController,
        part_index: int,
        line_index: int,
        line: IngredientLine,
        line_count: int,
        read_only: bool,
        pick_callback: Callable[[int, int], None],
    ):
        """
        Initialize ingredient line row.

        Args:
            parent: Parent widget
            controller: Controller that owns the editing copy
            part_index: Index of the part holding this line
            line_index: Position of the line within its part
            line: Line data to show
            line_count: Number of lines in the part (limits the move buttons)
            read_only: Disable every input (completed plans)
            pick_callback: Opens the ingredient search for (part, line)
        """
        super().__init__(parent, fg_color="transparent")

        state = "disabled" if read_only else "normal"

        # Ingredient / Base / Quantity / Unit / actions
        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=1)
        self.grid_columnconfigure(2, weight=1)

        name_button = ctk.CTkButton(
            self,
            text=line.ingredient_name or "Choose ingredient...",
            anchor="w",
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            state=state,
            command=lambda: pick_callback(part_index, line_index),
        )
        name_button.grid(row=0, column=0, padx=(0, PADDING_SMALL), pady=2, sticky="ew")

        base_label = ctk.CTkLabel(
            self,
            text=format_quantity(float(line.original_quantity or 0)),
            text_color="gray",
            anchor="e",
        )
        base_label.grid(row=0, column=1, padx=PADDING_SMALL, pady=2, sticky="ew")

        self.quantity_var = tk.StringVar(value=str(line.customized_quantity))
        quantity_entry = ctk.CTkEntry(
            self,
            width=90,
            textvariable=self.quantity_var,
            placeholder_text="Quantity",
            state=state,
        )
        quantity_entry.grid(row=0, column=2, padx=PADDING_SMALL, pady=2, sticky="ew")
        self.quantity_var.trace_add(
            "write",
            lambda *args: controller.set_ingredient_field(
                part_index, line_index, "customized_quantity", self.quantity_var.get()
            ),
        )

        units = list(RECIPE_UNITS)
        if line.unit and line.unit not in units:
            units.append(line.unit)
        unit_menu = ctk.CTkOptionMenu(
            self,
            values=units,
            width=70,
            state=state,
            command=lambda value: controller.set_ingredient_field(
                part_index, line_index, "unit", value
            ),
        )
        unit_menu.set(line.unit)
        unit_menu.grid(row=0, column=3, padx=PADDING_SMALL, pady=2)

        if read_only:
            return

        up_button = ctk.CTkButton(
            self,
            text="▲",
            width=28,
            state="normal" if line_index > 0 else "disabled",
            command=lambda: controller.reorder_ingredient(part_index, line_index, line_index - 1),
        )
        up_button.grid(row=0, column=4, padx=1, pady=2)

        down_button = ctk.CTkButton(
            self,
            text="▼",
            width=28,
            state="normal" if line_index < line_count - 1 else "disabled",
            command=lambda: controller.reorder_ingredient(part_index, line_index, line_index + 1),
        )
        down_button.grid(row=0, column=5, padx=1, pady=2)

        remove_button = ctk.CTkButton(
            self,
            text="✕",
            width=28,
            command=lambda: controller.remove_ingredient(part_index, line_index),
            fg_color="darkred",
            hover_color="red",
        )
        remove_button.grid(row=0, column=6, padx=(PADDING_SMALL, 0), pady=2)


class PartSection(ctk.CTkFrame):
    """One part of the recipe: name, percent and its ingredient lines."""

    def __init__(
        self,
        parent,
        controller: PlanDetailController,
        part_index: int,
        part: Part,
        read_only: bool,
        pick_callback: Callable[[int, int], None],
    ):
        super().__init__(parent)
        self.grid_columnconfigure(0, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=PADDING_MEDIUM, pady=(PADDING_SMALL, 0))
        header.grid_columnconfigure(0, weight=1)

        self.name_var = tk.StringVar(value=part.part_name)
        name_entry = ctk.CTkEntry(
            header,
            textvariable=self.name_var,
            placeholder_text="Part name",
            font=ctk.CTkFont(weight="bold"),
            state="disabled" if read_only else "normal",
        )
        name_entry.grid(row=0, column=0, sticky="ew")
        self.name_var.trace_add(
            "write",
            lambda *args: controller.rename_part(part_index, self.name_var.get()),
        )

        percent_label = ctk.CTkLabel(header, text=f"{format_quantity(float(part.percent))}%")
        percent_label.grid(row=0, column=1, padx=PADDING_MEDIUM)

        if not read_only:
            add_button = ctk.CTkButton(
                header,
                text="+ Ingredient",
                width=100,
                command=lambda: controller.add_ingredient(part_index),
            )
            add_button.grid(row=0, column=2, padx=PADDING_SMALL)

            remove_button = ctk.CTkButton(
                header,
                text="Remove Part",
                width=100,
                fg_color="darkred",
                hover_color="red",
                command=lambda: controller.remove_part(part_index),
            )
            remove_button.grid(row=0, column=3, padx=PADDING_SMALL)

        line_count = len(part.ingredients)
        for line_index, line in enumerate(part.ingredients):
            row = IngredientLineRow(
                self,
                controller,
                part_index,
                line_index,
                line,
                line_count,
                read_only,
                pick_callback,
            )
            row.grid(row=line_index + 1, column=0, sticky="ew", padx=PADDING_MEDIUM)


class RecipeEditorFrame(ctk.CTkScrollableFrame):
    """
    Scrollable editor for the controller's editing copy.

    Call render() after the controller publishes a plan or a structural
    edit; field edits need no re-render.
    """

    def __init__(
        self,
        parent: Any,
        controller: PlanDetailController,
        pick_callback: Callable[[int, int], None],
        **kwargs
    ):
        super().__init__(parent, **kwargs)
        self.controller = controller
        self._pick_callback = pick_callback
        self._sections: List[PartSection] = []
        self.grid_columnconfigure(0, weight=1)

    def render(self) -> None:
        for child in self.winfo_children():
            child.destroy()
        self._sections = []

        recipe = self.controller.editing
        if recipe is None:
            empty = ctk.CTkLabel(self, text="This plan has no recipes yet.", text_color="gray")
            empty.grid(row=0, column=0, pady=PADDING_MEDIUM)
            return

        read_only = self.controller.is_complete
        for part_index, part in enumerate(recipe.parts):
            section = PartSection(
                self, self.controller, part_index, part, read_only, self._pick_callback
            )
            section.grid(row=part_index, column=0, sticky="ew", pady=PADDING_SMALL)
            self._sections.append(section)

        if not read_only:
            add_part_button = ctk.CTkButton(
                self,
                text="+ Part",
                width=100,
                command=self.controller.add_part,
            )
            add_part_button.grid(row=len(recipe.parts), column=0, sticky="w", pady=PADDING_SMALL)
