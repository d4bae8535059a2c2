"""
Reusable dialog widgets for the Bakery Plan Client.

Provides a confirmation dialog and a text input dialog for memos and
descriptions.
"""

from typing import Optional

import customtkinter as ctk
from tkinter import messagebox

from src.utils.constants import PADDING_LARGE, PADDING_MEDIUM
from src.utils.validators import validate_string_length


def show_confirmation(
    title: str,
    message: str,
    parent=None,
) -> bool:
    """
    Show a confirmation dialog.

    Args:
        title: Dialog title
        message: Confirmation message
        parent: Parent window (optional)

    Returns:
        True if user confirmed, False otherwise
    """
    return messagebox.askyesno(title, message, parent=parent)


class TextInputDialog(ctk.CTkToplevel):
    """
    Modal dialog for editing a block of text.

    Used for plan memos and recipe descriptions. The result is the text
    entered, or None if the dialog was cancelled.
    """

    def __init__(
        self,
        parent,
        title: str,
        prompt: str,
        default_value: str = "",
        max_length: Optional[int] = None,
    ):
        """
        Initialize the input dialog.

        Args:
            parent: Parent window
            title: Dialog title
            prompt: Prompt text
            default_value: Text shown when the dialog opens
            max_length: Maximum accepted length (None for no limit)
        """
        super().__init__(parent)

        self.title(title)
        self.geometry("480x300")
        self.resizable(False, False)

        self.transient(parent)
        self.grab_set()

        self.result: Optional[str] = None
        self._max_length = max_length
        self._field_name = prompt

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        prompt_label = ctk.CTkLabel(self, text=prompt, anchor="w")
        prompt_label.grid(row=0, column=0, padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM), sticky="w")

        self.textbox = ctk.CTkTextbox(self, height=150)
        self.textbox.grid(row=1, column=0, padx=PADDING_LARGE, sticky="nsew")
        self.textbox.insert("1.0", default_value or "")
        self.textbox.focus()

        self.error_label = ctk.CTkLabel(self, text="", text_color="red", anchor="w")
        self.error_label.grid(row=2, column=0, padx=PADDING_LARGE, sticky="w")

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=3, column=0, padx=PADDING_LARGE, pady=(PADDING_MEDIUM, PADDING_LARGE))

        ok_button = ctk.CTkButton(button_frame, text="Save", width=100, command=self._ok_clicked)
        ok_button.grid(row=0, column=0, padx=5)

        cancel_button = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            fg_color="gray",
            command=self._cancel_clicked,
        )
        cancel_button.grid(row=0, column=1, padx=5)

        self.bind("<Escape>", lambda e: self._cancel_clicked())

    def _ok_clicked(self):
        """Handle Save button click."""
        text = self.textbox.get("1.0", "end-1c")
        if self._max_length is not None:
            is_valid, error = validate_string_length(text, self._max_length, self._field_name)
            if not is_valid:
                self.error_label.configure(text=error)
                return
        self.result = text
        self.destroy()

    def _cancel_clicked(self):
        """Handle Cancel button click."""
        self.result = None
        self.destroy()

    def get_input(self) -> Optional[str]:
        """
        Wait for the dialog to close.

        Returns:
            Entered text, or None if cancelled
        """
        self.wait_window()
        return self.result
