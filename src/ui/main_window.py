"""
Main application window for the Bakery Plan Client.

Provides the main window with a menu bar, the plan list / plan detail
screens and a status bar showing who is logged in.
"""

import tkinter as tk
import customtkinter as ctk
from tkinter import messagebox
from typing import Optional

from src.models.user import User
from src.services.api_client import ApiClient
from src.services.exceptions import ServiceError
from src.services.user_session import UserSession
from src.ui.planning import PinLoginDialog, PlanDetailView, PlanListView
from src.ui.utils.error_handler import handle_error, make_error_callback
from src.utils.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
)


class MainWindow(ctk.CTk):
    """
    Main application window.

    Shows the plan list until a plan is opened, then that plan's detail
    screen. Both screens require a logged-in user.
    """

    def __init__(self, client: ApiClient, session: UserSession):
        """
        Initialize the main window.

        Args:
            client: API client shared by every screen
            session: Login state shared by every screen
        """
        super().__init__()

        self.client = client
        self.session = session
        self.session.add_listener(self._on_user_changed)
        self.content: Optional[ctk.CTkFrame] = None

        # Window configuration
        self.title(f"{APP_NAME} - v{APP_VERSION}")
        self.geometry(f"{DEFAULT_WINDOW_WIDTH}x{DEFAULT_WINDOW_HEIGHT}")
        self.minsize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        # Configure grid layout
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)  # Content
        self.grid_rowconfigure(1, weight=0)  # Status bar

        self._create_menu_bar()
        self._create_status_bar()

        self.protocol("WM_DELETE_WINDOW", self._on_exit)
        self.after(100, self._require_login)

    def _create_menu_bar(self):
        """Create the native tkinter menu bar."""
        self.menu_bar = tk.Menu(self)
        self.config(menu=self.menu_bar)

        # File menu
        file_menu = tk.Menu(self.menu_bar, tearoff=0)
        file_menu.add_command(label="Plans", command=self.show_plan_list)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self._on_exit)
        self.menu_bar.add_cascade(label="File", menu=file_menu)

        # Account menu
        account_menu = tk.Menu(self.menu_bar, tearoff=0)
        account_menu.add_command(label="Log In...", command=self._show_login_dialog)
        account_menu.add_command(label="Log Out", command=self._logout)
        self.menu_bar.add_cascade(label="Account", menu=account_menu)

        # Help menu
        help_menu = tk.Menu(self.menu_bar, tearoff=0)
        help_menu.add_command(label="About", command=self._show_about)
        self.menu_bar.add_cascade(label="Help", menu=help_menu)

    def _create_status_bar(self):
        """Create the status bar at the bottom."""
        status_frame = ctk.CTkFrame(self, height=30, corner_radius=0)
        status_frame.grid(row=1, column=0, sticky="ew")
        status_frame.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(status_frame, text="Ready", anchor="w")
        self.status_label.grid(row=0, column=0, padx=10, pady=5, sticky="w")

        self.user_label = ctk.CTkLabel(status_frame, text="Not logged in", anchor="e")
        self.user_label.grid(row=0, column=1, padx=10, pady=5, sticky="e")

    def update_status(self, message: str):
        """
        Update the status bar message.

        Args:
            message: Status message to display
        """
        self.status_label.configure(text=message)

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def _set_content(self, frame: ctk.CTkFrame) -> None:
        if self.content is not None:
            self.content.destroy()
        self.content = frame
        frame.grid(row=0, column=0, padx=10, pady=10, sticky="nsew")

    def show_plan_list(self) -> None:
        """Show the plan list (requires login)."""
        if not self.session.is_logged_in:
            self._require_login()
            return
        view = PlanListView(self, self.client, on_open=self.show_plan_detail)
        self._set_content(view)
        view.refresh()
        self.update_status("Ready")

    def show_plan_detail(self, plan_id: int) -> None:
        """Open one plan's detail screen."""
        view = PlanDetailView(
            self,
            self.client,
            plan_id,
            on_back=self.show_plan_list,
            on_status=self.update_status,
        )
        self._set_content(view)

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    def _require_login(self) -> None:
        if self.session.is_logged_in:
            self.show_plan_list()
            return
        self._show_login_dialog()

    def _show_login_dialog(self) -> None:
        dialog = PinLoginDialog(self, self.session, on_error=make_error_callback(self))
        self.wait_window(dialog)
        if self.session.is_logged_in:
            self.show_plan_list()

    def _logout(self) -> None:
        try:
            self.session.logout()
        except ServiceError as e:
            handle_error(e, parent=self, operation="Log out")

    def _on_user_changed(self, user: Optional[User]) -> None:
        if user is None:
            self.user_label.configure(text="Not logged in")
            if self.content is not None:
                self.content.destroy()
                self.content = None
            self.update_status("Logged out")
        else:
            self.user_label.configure(text=f"Logged in as {user.username}")

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def _on_exit(self):
        """Handle application exit."""
        result = messagebox.askyesno(
            "Exit",
            "Are you sure you want to exit the application?",
            parent=self,
        )
        if result:
            self.destroy()

    def _show_about(self):
        """Show the about dialog."""
        messagebox.showinfo(
            "About",
            f"{APP_NAME}\nVersion {APP_VERSION}\n\n"
            "Scale bakery plan recipes, edit their ingredients\n"
            "and resolve ingredient shortages.",
            parent=self,
        )
