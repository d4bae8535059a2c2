"""
Main entry point for the Bakery Plan Client application.

This module configures logging, connects to the bakery backend, and
launches the main window.
"""

import logging
import sys
import traceback
import customtkinter as ctk

from src.services.api_client import ApiClient
from src.services.user_session import UserSession
from src.ui.main_window import MainWindow
from src.utils.config import get_config


def configure_logging(level: int) -> None:
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Main application entry point.

    Creates the shared API client and user session and launches the main
    window.
    """
    # Set CustomTkinter appearance
    ctk.set_appearance_mode("system")  # Modes: system, light, dark
    ctk.set_default_color_theme("blue")  # Themes: blue, dark-blue, green

    # Get configuration
    config = get_config()
    configure_logging(config.log_level)
    print(f"Starting {config.app_name} v{config.app_version}")
    print(f"Environment: {config.environment}")
    print(f"Backend: {config.api_base_url}")

    client = ApiClient(config.api_base_url, config.request_timeout)
    session = UserSession(client)

    # Create and run main window
    try:
        app = MainWindow(client, session)
        app.mainloop()

    except Exception as e:
        print(f"ERROR: Application crashed: {e}")
        traceback.print_exc()
        sys.exit(1)

    finally:
        client.close()

    print("Application closed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
