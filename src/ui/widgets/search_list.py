"""
Debounced search entry with an inline result list.

Reusable component for the recipe and ingredient pickers: the search runs
after the user stops typing for debounce_ms, and results are listed below
the entry as clickable rows.

Features:
- Debounce-based search triggering (default 300ms)
- Enter searches immediately
- Per-row label and optional disabled state (e.g. "already added")
- No service imports -- all data via injected callbacks

Usage:
    from src.ui.widgets.search_list import SearchList

    search = SearchList(
        master=frame,
        items_callback=lambda q: ingredient_service.search_ingredients(client, q),
        on_select_callback=self._on_pick,
        label_callback=lambda item: item.name,
    )
"""

import logging
from typing import Any, Callable, List, Optional

import customtkinter as ctk

from src.services.exceptions import ServiceError
from src.utils.constants import INGREDIENT_SEARCH_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class SearchList(ctk.CTkFrame):
    """
    Search entry plus a scrollable list of results.

    The widget owns at most one pending search timer; it is cancelled on
    every keystroke and when the widget is destroyed.
    """

    def __init__(
        self,
        master: Any,
        items_callback: Callable[[str], List[Any]],
        on_select_callback: Callable[[Any], None],
        label_callback: Callable[[Any], str] = str,
        disabled_callback: Optional[Callable[[Any], bool]] = None,
        on_error: Optional[Callable[[Exception, str], Any]] = None,
        debounce_ms: int = INGREDIENT_SEARCH_DEBOUNCE_MS,
        placeholder_text: str = "Search...",
        **kwargs,
    ):
        """
        Initialize the SearchList widget.

        Args:
            master: Parent widget
            items_callback: Called with the query, returns matching items
            on_select_callback: Called with the item the user clicked
            label_callback: Text shown for an item
            disabled_callback: Returns True for items that cannot be picked
            on_error: Called with (exception, operation) when a search fails
            debounce_ms: Milliseconds to wait after last keystroke
            placeholder_text: Placeholder text in empty entry field
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(master, **kwargs)

        self._items_callback = items_callback
        self._on_select_callback = on_select_callback
        self._label_callback = label_callback
        self._disabled_callback = disabled_callback
        self._on_error = on_error
        self.debounce_ms = debounce_ms

        self._debounce_id: Optional[str] = None
        self._results: List[Any] = []

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._entry = ctk.CTkEntry(self, placeholder_text=placeholder_text)
        self._entry.grid(row=0, column=0, sticky="ew", pady=(0, 5))
        self._entry.bind("<KeyRelease>", self._on_key_release)
        self._entry.bind("<Return>", lambda e: self.search_now())

        self._list_frame = ctk.CTkScrollableFrame(self, height=220)
        self._list_frame.grid(row=1, column=0, sticky="nsew")
        self._list_frame.grid_columnconfigure(0, weight=1)

        self._status_label = ctk.CTkLabel(self, text="", anchor="w", text_color="gray")
        self._status_label.grid(row=2, column=0, sticky="w")

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    def get_text(self) -> str:
        return self._entry.get()

    def set_text(self, text: str) -> None:
        self._entry.delete(0, "end")
        self._entry.insert(0, text)

    def set_focus(self) -> None:
        self._entry.focus_set()

    def search_now(self) -> None:
        """Run the search at once, dropping any pending timer."""
        self._cancel_pending()
        self._execute_search(self._entry.get().strip())

    def destroy(self) -> None:
        """Cancel the pending search before destroying."""
        self._cancel_pending()
        super().destroy()

    # ------------------------------------------------------------------
    # Search execution
    # ------------------------------------------------------------------

    def _on_key_release(self, event) -> None:
        """Restart the debounce timer on every edit."""
        if event.keysym in ("Return", "Tab", "Escape", "Up", "Down"):
            return
        self._cancel_pending()
        query = self._entry.get().strip()
        self._debounce_id = self.after(self.debounce_ms, lambda: self._execute_search(query))

    def _cancel_pending(self) -> None:
        if self._debounce_id:
            self.after_cancel(self._debounce_id)
            self._debounce_id = None

    def _execute_search(self, query: str) -> None:
        self._debounce_id = None
        try:
            results = self._items_callback(query) if query else []
        except ServiceError as e:
            if self._on_error is not None:
                self._on_error(e, "Search")
            else:
                logger.warning(f"Search for '{query}' failed: {e}")
            results = []

        self._results = results
        self._render_results(query)

    def _render_results(self, query: str) -> None:
        for child in self._list_frame.winfo_children():
            child.destroy()

        for row, item in enumerate(self._results):
            disabled = bool(self._disabled_callback and self._disabled_callback(item))
            button = ctk.CTkButton(
                self._list_frame,
                text=self._label_callback(item),
                anchor="w",
                fg_color="transparent",
                text_color=("gray10", "gray90"),
                hover_color=("gray80", "gray30"),
                state="disabled" if disabled else "normal",
                command=lambda selected=item: self._on_select_callback(selected),
            )
            button.grid(row=row, column=0, sticky="ew", pady=1)

        if not query:
            self._status_label.configure(text="")
        elif not self._results:
            self._status_label.configure(text=f"No results for '{query}'")
        else:
            self._status_label.configure(text=f"{len(self._results)} result(s)")
