"""
Ingredient search dialog.

Used to pick the ingredient of a recipe line and to choose the
replacement for a lacking ingredient.
"""

from typing import Any, Callable, Optional

import customtkinter as ctk

from src.models.catalog import IngredientSearchItem
from src.services import ingredient_service
from src.services.api_client import ApiClient
from src.ui.widgets.search_list import SearchList
from src.utils.constants import INGREDIENT_SEARCH_DEBOUNCE_MS, PADDING_LARGE, PADDING_MEDIUM


class IngredientSearchDialog(ctk.CTkToplevel):
    """
    Modal ingredient picker.

    The result is the chosen IngredientSearchItem, or None if cancelled.
    """

    def __init__(
        self,
        parent: Any,
        client: ApiClient,
        title: str = "Choose Ingredient",
        prompt: str = "Search for an ingredient",
        initial_text: str = "",
        on_error: Optional[Callable[[Exception, str], Any]] = None,
    ):
        super().__init__(parent)

        self.result: Optional[IngredientSearchItem] = None

        self.title(title)
        self.geometry("400x420")
        self.transient(parent)
        self.grab_set()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(self, text=prompt, anchor="w").grid(
            row=0, column=0, sticky="w", padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM)
        )

        self.search = SearchList(
            self,
            items_callback=lambda query: ingredient_service.search_ingredients(client, query),
            on_select_callback=self._on_select,
            label_callback=lambda item: item.name,
            on_error=on_error,
            debounce_ms=INGREDIENT_SEARCH_DEBOUNCE_MS,
            placeholder_text="Ingredient name",
        )
        self.search.grid(row=1, column=0, sticky="nsew", padx=PADDING_LARGE)

        ctk.CTkButton(self, text="Cancel", width=100, fg_color="gray", command=self._cancel).grid(
            row=2, column=0, pady=PADDING_LARGE
        )

        self.bind("<Escape>", lambda e: self._cancel())

        if initial_text:
            self.search.set_text(initial_text)
            self.search.search_now()
        self.search.set_focus()

    def _on_select(self, item: IngredientSearchItem) -> None:
        self.result = item
        self.destroy()

    def _cancel(self) -> None:
        self.result = None
        self.destroy()

    def get_result(self) -> Optional[IngredientSearchItem]:
        """Wait for the dialog to close and return the picked ingredient."""
        self.wait_window()
        return self.result
