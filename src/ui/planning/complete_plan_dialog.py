"""
Complete plan dialog.

Temporary recipes become real recipes when the plan is completed, so
each gets a final name and description here before submission.
"""

from typing import Any, List, Tuple

import customtkinter as ctk

from src.services.planning.completion import RecipeRename, initial_renames
from src.services.planning.plan_detail_controller import PlanDetailController
from src.utils.constants import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH, PADDING_LARGE, PADDING_MEDIUM, PADDING_SMALL


class CompletePlanDialog(ctk.CTkToplevel):
    """
    Collect final names and complete the plan.

    Attributes:
        result: True once the plan was completed
    """

    def __init__(self, parent: Any, controller: PlanDetailController):
        super().__init__(parent)

        self.controller = controller
        self.result = False
        self._renames = initial_renames(controller.plan)
        self._entries: List[Tuple[ctk.CTkEntry, ctk.CTkTextbox]] = []

        self.title("Complete Plan")
        self.geometry("520x520")
        self.transient(parent)
        self.grab_set()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        if self._renames:
            intro = "Name the recipes created in this plan. Names must be new and unique."
        else:
            intro = "Complete this plan? Completed plans can no longer be edited."
        ctk.CTkLabel(self, text=intro, anchor="w", wraplength=460, justify="left").grid(
            row=0, column=0, sticky="ew", padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM)
        )

        form = ctk.CTkScrollableFrame(self)
        form.grid(row=1, column=0, sticky="nsew", padx=PADDING_LARGE)
        form.grid_columnconfigure(1, weight=1)

        for index, rename in enumerate(self._renames):
            base_row = index * 3
            ctk.CTkLabel(form, text="Name", anchor="w").grid(
                row=base_row, column=0, sticky="w", padx=PADDING_SMALL, pady=(PADDING_MEDIUM, 2)
            )
            name_entry = ctk.CTkEntry(form)
            name_entry.insert(0, rename.new_name[:MAX_NAME_LENGTH])
            name_entry.grid(row=base_row, column=1, sticky="ew", padx=PADDING_SMALL, pady=(PADDING_MEDIUM, 2))

            ctk.CTkLabel(form, text="Description", anchor="w").grid(
                row=base_row + 1, column=0, sticky="nw", padx=PADDING_SMALL, pady=2
            )
            description_box = ctk.CTkTextbox(form, height=60)
            description_box.insert("1.0", rename.new_description[:MAX_DESCRIPTION_LENGTH])
            description_box.grid(row=base_row + 1, column=1, sticky="ew", padx=PADDING_SMALL, pady=2)

            self._entries.append((name_entry, description_box))

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=2, column=0, pady=PADDING_LARGE)
        self.submit_button = ctk.CTkButton(button_frame, text="Complete", width=120, command=self._submit)
        self.submit_button.grid(row=0, column=0, padx=PADDING_SMALL)
        ctk.CTkButton(button_frame, text="Cancel", width=100, fg_color="gray", command=self.destroy).grid(
            row=0, column=1, padx=PADDING_SMALL
        )

    def _collect(self) -> List[RecipeRename]:
        return [
            RecipeRename(
                recipe_id=rename.recipe_id,
                new_name=name_entry.get(),
                new_description=description_box.get("1.0", "end-1c"),
            )
            for rename, (name_entry, description_box) in zip(self._renames, self._entries)
        ]

    def _submit(self) -> None:
        self.submit_button.configure(state="disabled")
        try:
            completed = self.controller.complete_plan(self._collect())
        finally:
            if self.winfo_exists():
                self.submit_button.configure(state="normal")
        if completed:
            self.result = True
            self.destroy()
