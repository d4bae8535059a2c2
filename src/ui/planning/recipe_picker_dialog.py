"""
Recipe picker dialogs.

RecipePickerDialog adds one recipe to an existing plan; recipes already
in the plan are listed but cannot be picked. CreatePlanDialog collects
several recipes for a new plan.
"""

from typing import Any, Callable, Collection, List, Optional

import customtkinter as ctk

from src.models.catalog import RecipeSearchItem
from src.services import recipe_service
from src.services.api_client import ApiClient
from src.ui.widgets.search_list import SearchList
from src.utils.constants import PADDING_LARGE, PADDING_MEDIUM, PADDING_SMALL

ErrorCallback = Callable[[Exception, str], Any]


def _recipe_label(item: RecipeSearchItem, added_ids: Collection[int] = ()) -> str:
    label = f"{'★ ' if item.favorite else ''}{item.recipe_name}"
    if item.recipe_id in added_ids:
        label += "  (already added)"
    return label


class RecipePickerDialog(ctk.CTkToplevel):
    """
    Modal dialog for adding one recipe to a plan.

    The result is the chosen RecipeSearchItem, or None if cancelled.
    """

    def __init__(
        self,
        parent: Any,
        client: ApiClient,
        added_recipe_ids: Collection[int] = (),
        on_error: Optional[ErrorCallback] = None,
    ):
        super().__init__(parent)

        self.result: Optional[RecipeSearchItem] = None
        added = set(added_recipe_ids)

        self.title("Add Recipe")
        self.geometry("420x440")
        self.transient(parent)
        self.grab_set()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.search = SearchList(
            self,
            items_callback=lambda query: recipe_service.search_recipes(client, query),
            on_select_callback=self._on_select,
            label_callback=lambda item: _recipe_label(item, added),
            disabled_callback=lambda item: item.recipe_id in added,
            on_error=on_error,
            placeholder_text="Recipe name",
        )
        self.search.grid(row=0, column=0, sticky="nsew", padx=PADDING_LARGE, pady=(PADDING_LARGE, 0))

        ctk.CTkButton(self, text="Cancel", width=100, fg_color="gray", command=self._cancel).grid(
            row=1, column=0, pady=PADDING_LARGE
        )
        self.bind("<Escape>", lambda e: self._cancel())
        self.search.set_focus()

    def _on_select(self, item: RecipeSearchItem) -> None:
        self.result = item
        self.destroy()

    def _cancel(self) -> None:
        self.result = None
        self.destroy()

    def get_result(self) -> Optional[RecipeSearchItem]:
        self.wait_window()
        return self.result


class CreatePlanDialog(ctk.CTkToplevel):
    """
    Modal dialog for starting a new plan from one or more recipes.

    The result is the list of chosen recipes, or None if cancelled.
    """

    def __init__(
        self,
        parent: Any,
        client: ApiClient,
        on_error: Optional[ErrorCallback] = None,
    ):
        super().__init__(parent)

        self.result: Optional[List[RecipeSearchItem]] = None
        self._chosen: List[RecipeSearchItem] = []

        self.title("New Plan")
        self.geometry("460x560")
        self.transient(parent)
        self.grab_set()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.search = SearchList(
            self,
            items_callback=lambda query: recipe_service.search_recipes(client, query),
            on_select_callback=self._on_select,
            label_callback=lambda item: _recipe_label(item, self._chosen_ids()),
            disabled_callback=lambda item: item.recipe_id in self._chosen_ids(),
            on_error=on_error,
            placeholder_text="Recipe name",
        )
        self.search.grid(row=0, column=0, sticky="nsew", padx=PADDING_LARGE, pady=(PADDING_LARGE, 0))

        ctk.CTkLabel(self, text="Recipes in the new plan", anchor="w", font=ctk.CTkFont(weight="bold")).grid(
            row=1, column=0, sticky="w", padx=PADDING_LARGE, pady=(PADDING_MEDIUM, 0)
        )
        self.chosen_frame = ctk.CTkScrollableFrame(self, height=120)
        self.chosen_frame.grid(row=2, column=0, sticky="ew", padx=PADDING_LARGE)
        self.chosen_frame.grid_columnconfigure(0, weight=1)

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=3, column=0, pady=PADDING_LARGE)
        self.create_button = ctk.CTkButton(
            button_frame, text="Create Plan", width=120, state="disabled", command=self._create
        )
        self.create_button.grid(row=0, column=0, padx=PADDING_SMALL)
        ctk.CTkButton(button_frame, text="Cancel", width=100, fg_color="gray", command=self._cancel).grid(
            row=0, column=1, padx=PADDING_SMALL
        )

        self.bind("<Escape>", lambda e: self._cancel())
        self.search.set_focus()

    def _chosen_ids(self) -> List[int]:
        return [item.recipe_id for item in self._chosen]

    def _on_select(self, item: RecipeSearchItem) -> None:
        if item.recipe_id in self._chosen_ids():
            return
        self._chosen.append(item)
        self._refresh_chosen()
        self.search.search_now()

    def _remove(self, item: RecipeSearchItem) -> None:
        self._chosen = [chosen for chosen in self._chosen if chosen.recipe_id != item.recipe_id]
        self._refresh_chosen()

    def _refresh_chosen(self) -> None:
        for child in self.chosen_frame.winfo_children():
            child.destroy()
        for row, item in enumerate(self._chosen):
            ctk.CTkLabel(self.chosen_frame, text=item.recipe_name, anchor="w").grid(
                row=row, column=0, sticky="ew", padx=PADDING_SMALL
            )
            ctk.CTkButton(
                self.chosen_frame,
                text="✕",
                width=28,
                fg_color="darkred",
                hover_color="red",
                command=lambda selected=item: self._remove(selected),
            ).grid(row=row, column=1, pady=1)
        self.create_button.configure(state="normal" if self._chosen else "disabled")

    def _create(self) -> None:
        self.result = list(self._chosen)
        self.destroy()

    def _cancel(self) -> None:
        self.result = None
        self.destroy()

    def get_result(self) -> Optional[List[RecipeSearchItem]]:
        self.wait_window()
        return self.result
