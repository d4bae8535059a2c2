"""
Widget exports for the UI package.
"""

from src.ui.widgets.search_list import SearchList
from src.ui.widgets.dialogs import (
    TextInputDialog,
    show_confirmation,
)

__all__ = [
    "SearchList",
    "TextInputDialog",
    "show_confirmation",
]
