"""LackingIngredientsFrame - shortage list for a plan.

Shows every ingredient whose plan-wide requirement exceeds stock with
Need/Have/Lacking columns, a Replace action that swaps the ingredient in
the selected recipe, and a Shop link.
"""

import webbrowser
from typing import Any, Callable, List, Optional

import customtkinter as ctk

from src.models.plan import LackingIngredient
from src.services.ingredient_service import shopping_url
from src.utils.constants import COLOR_LACKING


def format_quantity(value: float) -> str:
    """Show whole numbers without decimals."""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}"


class LackingIngredientRow(ctk.CTkFrame):
    """Single row in the lacking ingredients table."""

    def __init__(
        self,
        parent: Any,
        item: LackingIngredient,
        on_replace: Optional[Callable[[LackingIngredient], None]],
        **kwargs
    ):
        """Initialize LackingIngredientRow.

        Args:
            parent: Parent widget
            item: Lacking ingredient data
            on_replace: Called with item when Replace is clicked; None hides it
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(parent, **kwargs)

        self.grid_columnconfigure(0, weight=2)  # Ingredient name
        self.grid_columnconfigure(1, weight=1)  # Need
        self.grid_columnconfigure(2, weight=1)  # Have
        self.grid_columnconfigure(3, weight=1)  # Lacking

        name_label = ctk.CTkLabel(self, text=item.name, anchor="w")
        name_label.grid(row=0, column=0, sticky="ew", padx=5, pady=3)

        need_label = ctk.CTkLabel(self, text=format_quantity(item.required_quantity), anchor="e")
        need_label.grid(row=0, column=1, sticky="ew", padx=5, pady=3)

        have_label = ctk.CTkLabel(self, text=format_quantity(item.current_stock), anchor="e")
        have_label.grid(row=0, column=2, sticky="ew", padx=5, pady=3)

        lacking_label = ctk.CTkLabel(
            self,
            text=format_quantity(item.lacking_quantity),
            anchor="e",
            text_color=COLOR_LACKING,
        )
        lacking_label.grid(row=0, column=3, sticky="ew", padx=5, pady=3)

        if on_replace is not None:
            replace_btn = ctk.CTkButton(
                self,
                text="Replace",
                width=70,
                height=26,
                command=lambda: on_replace(item),
            )
            replace_btn.grid(row=0, column=4, padx=3, pady=3)

        shop_btn = ctk.CTkButton(
            self,
            text="Shop",
            width=60,
            height=26,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: webbrowser.open(shopping_url(item.name)),
        )
        shop_btn.grid(row=0, column=5, padx=3, pady=3)


class LackingTableHeader(ctk.CTkFrame):
    """Header row for the lacking ingredients table."""

    def __init__(self, parent: Any, **kwargs):
        kwargs.setdefault("fg_color", ("gray80", "gray30"))
        super().__init__(parent, **kwargs)

        self.grid_columnconfigure(0, weight=2)
        self.grid_columnconfigure(1, weight=1)
        self.grid_columnconfigure(2, weight=1)
        self.grid_columnconfigure(3, weight=1)

        headers = ["Ingredient", "Need", "Have", "Lacking"]
        for i, header in enumerate(headers):
            label = ctk.CTkLabel(
                self,
                text=header,
                font=ctk.CTkFont(weight="bold"),
                anchor="w" if i == 0 else "e",
            )
            label.grid(row=0, column=i, sticky="ew", padx=5, pady=5)

        # Spacer matching the action buttons of each row
        spacer = ctk.CTkLabel(self, text="", width=140)
        spacer.grid(row=0, column=4, padx=3)


class LackingIngredientsFrame(ctk.CTkFrame):
    """Shortage panel of the plan detail screen."""

    def __init__(
        self,
        parent: Any,
        on_replace: Callable[[LackingIngredient], None],
        **kwargs
    ):
        """Initialize LackingIngredientsFrame.

        Args:
            parent: Parent widget
            on_replace: Called with the ingredient the user wants to replace
            **kwargs: Additional arguments passed to CTkFrame
        """
        super().__init__(parent, **kwargs)
        self._on_replace = on_replace

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        title = ctk.CTkLabel(
            self,
            text="Lacking Ingredients",
            font=ctk.CTkFont(size=16, weight="bold"),
            anchor="w",
        )
        title.grid(row=0, column=0, sticky="w", padx=10, pady=(10, 5))

        LackingTableHeader(self).grid(row=1, column=0, sticky="ew", padx=10)

        self.rows_frame = ctk.CTkScrollableFrame(self, height=160, fg_color="transparent")
        self.rows_frame.grid(row=2, column=0, sticky="nsew", padx=10, pady=(0, 10))
        self.rows_frame.grid_columnconfigure(0, weight=1)

    def set_items(self, items: List[LackingIngredient], read_only: bool = False) -> None:
        """Replace the shown rows.

        Args:
            items: Shortages from the last plan fetch
            read_only: Hide the Replace action (completed plans)
        """
        for child in self.rows_frame.winfo_children():
            child.destroy()

        if not items:
            empty = ctk.CTkLabel(
                self.rows_frame,
                text="Everything is in stock.",
                text_color="gray",
            )
            empty.grid(row=0, column=0, pady=10)
            return

        on_replace = None if read_only else self._on_replace
        for row, item in enumerate(items):
            LackingIngredientRow(self.rows_frame, item, on_replace).grid(
                row=row, column=0, sticky="ew"
            )
