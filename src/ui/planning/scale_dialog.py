"""
Scale dialog for the selected plan recipe.

Two independent actions:
- overall percent: previews the resulting goal quantity while typing
  and sends the percent as entered
- part percents: one percent per part, sent together
"""

import tkinter as tk
from typing import Any

import customtkinter as ctk

from src.services.planning.plan_detail_controller import PlanDetailController
from src.services.planning.scale_preview import ScalePreviewController
from src.ui.planning.lacking_ingredients_frame import format_quantity
from src.utils.constants import PADDING_LARGE, PADDING_MEDIUM, PADDING_SMALL


class ScaleDialog(ctk.CTkToplevel):
    """
    Dialog for scaling a recipe by percent.

    The dialog itself is the preview controller's scheduler, and the
    pending preview timer is cancelled when the dialog closes.
    """

    def __init__(self, parent: Any, controller: PlanDetailController):
        """
        Initialize the scale dialog.

        Args:
            parent: Parent window
            controller: Plan detail controller; its editing recipe is scaled
        """
        super().__init__(parent)

        self.controller = controller
        recipe = controller.editing

        self.title(f"Scale - {recipe.name}")
        self.geometry("420x480")
        self.resizable(False, True)
        self.transient(parent)
        self.grab_set()
        self.protocol("WM_DELETE_WINDOW", self._close)

        self.grid_columnconfigure(0, weight=1)

        # Overall percent
        overall_frame = ctk.CTkFrame(self)
        overall_frame.grid(row=0, column=0, sticky="ew", padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM))
        overall_frame.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            overall_frame,
            text="Overall",
            font=ctk.CTkFont(weight="bold"),
        ).grid(row=0, column=0, columnspan=3, sticky="w", padx=PADDING_MEDIUM, pady=(PADDING_MEDIUM, 0))

        ctk.CTkLabel(overall_frame, text="Percent").grid(row=1, column=0, padx=PADDING_MEDIUM, pady=PADDING_SMALL, sticky="w")
        self.percent_var = tk.StringVar()
        percent_entry = ctk.CTkEntry(overall_frame, textvariable=self.percent_var, width=100)
        percent_entry.grid(row=1, column=1, padx=PADDING_SMALL, pady=PADDING_SMALL, sticky="w")
        ctk.CTkLabel(overall_frame, text="%").grid(row=1, column=2, sticky="w")

        ctk.CTkLabel(overall_frame, text="Goal quantity").grid(row=2, column=0, padx=PADDING_MEDIUM, pady=PADDING_SMALL, sticky="w")
        self.preview_label = ctk.CTkLabel(overall_frame, text="0", anchor="w")
        self.preview_label.grid(row=2, column=1, padx=PADDING_SMALL, pady=PADDING_SMALL, sticky="w")
        ctk.CTkLabel(
            overall_frame,
            text=f"Base output: {format_quantity(float(recipe.output_quantity))}",
            text_color="gray",
        ).grid(row=3, column=0, columnspan=3, padx=PADDING_MEDIUM, sticky="w")

        ctk.CTkButton(
            overall_frame,
            text="Apply Overall",
            command=self._apply_overall,
        ).grid(row=4, column=0, columnspan=3, padx=PADDING_MEDIUM, pady=PADDING_MEDIUM, sticky="e")

        # Part percents
        parts_frame = ctk.CTkScrollableFrame(self, label_text="Parts")
        parts_frame.grid(row=1, column=0, sticky="nsew", padx=PADDING_LARGE, pady=PADDING_SMALL)
        parts_frame.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.preview = ScalePreviewController(self, on_preview=self._show_preview)
        self.preview.open(recipe)

        self.percent_var.set(format_quantity(float(self.preview.overall_percent)))
        self.percent_var.trace_add("write", self._on_percent_changed)

        self.part_vars = []
        for index, part in enumerate(recipe.parts):
            ctk.CTkLabel(parts_frame, text=part.part_name or "(unnamed)", anchor="w").grid(
                row=index, column=0, sticky="ew", padx=PADDING_SMALL, pady=2
            )
            var = tk.StringVar(value=format_quantity(float(part.percent)))
            ctk.CTkEntry(parts_frame, textvariable=var, width=80).grid(
                row=index, column=1, padx=PADDING_SMALL, pady=2
            )
            ctk.CTkLabel(parts_frame, text="%").grid(row=index, column=2, sticky="w")
            var.trace_add(
                "write", lambda *args, i=index, v=var: self.preview.set_part_percent(i, v.get())
            )
            self.part_vars.append(var)

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=2, column=0, padx=PADDING_LARGE, pady=(PADDING_SMALL, PADDING_LARGE), sticky="e")

        ctk.CTkButton(button_frame, text="Apply Parts", width=110, command=self._apply_parts).grid(
            row=0, column=0, padx=PADDING_SMALL
        )
        ctk.CTkButton(
            button_frame, text="Close", width=90, fg_color="gray", command=self._close
        ).grid(row=0, column=1, padx=PADDING_SMALL)

        self.bind("<Escape>", lambda e: self._close())

    def _on_percent_changed(self, *args) -> None:
        self.preview.set_overall_percent(self.percent_var.get())

    def _show_preview(self, value: int) -> None:
        self.preview_label.configure(text=str(value))

    def _apply_overall(self) -> None:
        if self.controller.apply_overall_percent(self.percent_var.get()):
            self._close()

    def _apply_parts(self) -> None:
        if self.controller.apply_part_percents(self.preview.part_percents):
            self._close()

    def _close(self) -> None:
        self.preview.close()
        self.destroy()
