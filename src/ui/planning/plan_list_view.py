"""PlanListView - paged list of the user's plans.

Each row opens the plan detail screen; "New Plan" creates a plan from
recipes chosen in the recipe picker.
"""

from typing import Any, Callable, Optional

import customtkinter as ctk

from src.models.catalog import PlanPage, PlanSummary
from src.services import plan_service
from src.services.api_client import ApiClient
from src.services.exceptions import ServiceError
from src.ui.planning.recipe_picker_dialog import CreatePlanDialog
from src.ui.utils.error_handler import handle_error, make_error_callback
from src.utils.constants import COLOR_SUCCESS, PADDING_MEDIUM, PADDING_SMALL


class PlanRow(ctk.CTkFrame):
    """Single row in the plan list."""

    def __init__(self, parent: Any, plan: PlanSummary, on_open: Callable[[int], None], **kwargs):
        super().__init__(parent, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=plan.plan_name or f"Plan #{plan.plan_id}",
            font=ctk.CTkFont(weight="bold"),
            anchor="w",
        ).grid(row=0, column=0, sticky="ew", padx=PADDING_MEDIUM, pady=(PADDING_SMALL, 0))

        recipes = ", ".join(plan.recipe_names) or f"{plan.recipe_count} recipe(s)"
        ctk.CTkLabel(self, text=recipes, anchor="w", text_color="gray").grid(
            row=1, column=0, sticky="ew", padx=PADDING_MEDIUM, pady=(0, PADDING_SMALL)
        )

        if plan.is_complete:
            ctk.CTkLabel(self, text="Complete", text_color=COLOR_SUCCESS).grid(
                row=0, column=1, rowspan=2, padx=PADDING_MEDIUM
            )

        ctk.CTkButton(
            self,
            text="Open",
            width=70,
            command=lambda: on_open(plan.plan_id),
        ).grid(row=0, column=2, rowspan=2, padx=PADDING_MEDIUM)


class PlanListView(ctk.CTkFrame):
    """Plan list screen."""

    def __init__(
        self,
        parent: Any,
        client: ApiClient,
        on_open: Callable[[int], None],
        **kwargs
    ):
        """Initialize PlanListView.

        Args:
            parent: Parent widget
            client: API client shared by the application
            on_open: Called with a plan ID to open its detail screen
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(parent, **kwargs)

        self.client = client
        self.on_open = on_open
        self.page: Optional[PlanPage] = None
        self._page_number = 0

        self._setup_ui()

    def _setup_ui(self) -> None:
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        toolbar = ctk.CTkFrame(self, fg_color="transparent")
        toolbar.grid(row=0, column=0, sticky="ew", pady=(0, PADDING_SMALL))
        toolbar.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(toolbar, text="Plans", font=ctk.CTkFont(size=20, weight="bold")).grid(
            row=0, column=0, sticky="w"
        )
        ctk.CTkButton(toolbar, text="Refresh", width=80, command=self.refresh).grid(
            row=0, column=1, padx=PADDING_SMALL
        )
        ctk.CTkButton(toolbar, text="+ New Plan", width=100, command=self._create_plan).grid(
            row=0, column=2, padx=PADDING_SMALL
        )

        self.rows_frame = ctk.CTkScrollableFrame(self)
        self.rows_frame.grid(row=1, column=0, sticky="nsew")
        self.rows_frame.grid_columnconfigure(0, weight=1)

        pager = ctk.CTkFrame(self, fg_color="transparent")
        pager.grid(row=2, column=0, pady=PADDING_SMALL)
        self.prev_button = ctk.CTkButton(pager, text="◀", width=40, command=lambda: self._go(-1))
        self.prev_button.grid(row=0, column=0)
        self.page_label = ctk.CTkLabel(pager, text="")
        self.page_label.grid(row=0, column=1, padx=PADDING_MEDIUM)
        self.next_button = ctk.CTkButton(pager, text="▶", width=40, command=lambda: self._go(1))
        self.next_button.grid(row=0, column=2)

    def refresh(self) -> None:
        """Load the current page of plans."""
        try:
            self.page = plan_service.list_plans(self.client, self._page_number)
        except ServiceError as e:
            handle_error(e, parent=self.winfo_toplevel(), operation="Load plans")
            return
        self._render()

    def _render(self) -> None:
        for child in self.rows_frame.winfo_children():
            child.destroy()

        if not self.page.plans:
            ctk.CTkLabel(self.rows_frame, text="No plans yet.", text_color="gray").grid(
                row=0, column=0, pady=PADDING_MEDIUM
            )

        for row, plan in enumerate(self.page.plans):
            PlanRow(self.rows_frame, plan, self.on_open).grid(
                row=row, column=0, sticky="ew", pady=2
            )

        self.page_label.configure(text=f"{self.page.page_number + 1} / {max(self.page.total_pages, 1)}")
        self.prev_button.configure(state="normal" if self.page.has_prev else "disabled")
        self.next_button.configure(state="normal" if self.page.has_next else "disabled")

    def _go(self, step: int) -> None:
        self._page_number = max(0, self._page_number + step)
        self.refresh()

    def _create_plan(self) -> None:
        dialog = CreatePlanDialog(
            self.winfo_toplevel(),
            self.client,
            on_error=make_error_callback(self.winfo_toplevel()),
        )
        recipes = dialog.get_result()
        if not recipes:
            return
        try:
            plan_id = plan_service.create_plan(self.client, [item.recipe_id for item in recipes])
        except ServiceError as e:
            handle_error(e, parent=self.winfo_toplevel(), operation="Create plan")
            return
        self.on_open(plan_id)
