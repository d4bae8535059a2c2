"""
PIN login dialog.

A four-digit keypad; the login request is sent once four digits are in.
"""

from typing import Any, Callable, Optional

import customtkinter as ctk

from src.services.exceptions import ServiceError
from src.services.user_session import UserSession
from src.utils.constants import PADDING_LARGE, PADDING_SMALL, PIN_LENGTH

KEYPAD = [
    ["1", "2", "3"],
    ["4", "5", "6"],
    ["7", "8", "9"],
    ["", "0", "⌫"],
]


class PinLoginDialog(ctk.CTkToplevel):
    """
    Modal PIN pad that logs the session in.

    Attributes:
        result: The logged-in user, or None
    """

    def __init__(
        self,
        parent: Any,
        session: UserSession,
        on_error: Optional[Callable[[Exception, str], Any]] = None,
    ):
        super().__init__(parent)

        self.session = session
        self._on_error = on_error
        self.result = None
        self._pin = ""

        self.title("Log In")
        self.geometry("280x380")
        self.resizable(False, False)
        self.transient(parent)
        self.grab_set()

        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(self, text="Enter your PIN", font=ctk.CTkFont(size=16, weight="bold")).grid(
            row=0, column=0, pady=(PADDING_LARGE, PADDING_SMALL)
        )
        self.dots_label = ctk.CTkLabel(self, text=self._dots(), font=ctk.CTkFont(size=24))
        self.dots_label.grid(row=1, column=0, pady=PADDING_SMALL)

        keypad = ctk.CTkFrame(self, fg_color="transparent")
        keypad.grid(row=2, column=0, pady=PADDING_SMALL)
        for r, row in enumerate(KEYPAD):
            for c, key in enumerate(row):
                if not key:
                    continue
                ctk.CTkButton(
                    keypad,
                    text=key,
                    width=60,
                    height=50,
                    command=lambda k=key: self._on_key(k),
                ).grid(row=r, column=c, padx=4, pady=4)

        self.bind("<Key>", self._on_keyboard)
        self.bind("<Escape>", lambda e: self.destroy())
        self.focus_force()

    def _dots(self) -> str:
        return " ".join("●" if i < len(self._pin) else "○" for i in range(PIN_LENGTH))

    def _on_keyboard(self, event) -> None:
        if event.char.isdigit():
            self._on_key(event.char)
        elif event.keysym == "BackSpace":
            self._on_key("⌫")

    def _on_key(self, key: str) -> None:
        if key == "⌫":
            self._pin = self._pin[:-1]
        elif len(self._pin) < PIN_LENGTH:
            self._pin += key
        self.dots_label.configure(text=self._dots())

        if len(self._pin) == PIN_LENGTH:
            self._submit()

    def _submit(self) -> None:
        pin, self._pin = self._pin, ""
        try:
            self.result = self.session.login(pin)
        except ServiceError as e:
            self.dots_label.configure(text=self._dots())
            if self._on_error is not None:
                self._on_error(e, "Log in")
            return
        self.destroy()
