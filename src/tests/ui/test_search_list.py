"""
Tests for the SearchList widget.

Covers the debounce timer, immediate search, result rendering and error
routing. Uses mock callbacks in place of the search services.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.services.exceptions import ApiError

# Guard against missing display -- tkinter requires a display
try:
    import tkinter as tk

    _root = tk.Tk()
    _root.withdraw()
    _HAS_DISPLAY = True
except Exception:
    _HAS_DISPLAY = False

pytestmark = pytest.mark.skipif(
    not _HAS_DISPLAY, reason="No display available for tkinter tests"
)


@pytest.fixture
def root():
    """Provide a hidden tkinter root window for testing."""
    if not _HAS_DISPLAY:
        pytest.skip("No display")
    yield _root


@pytest.fixture
def items_callback():
    callback = MagicMock()
    callback.return_value = ["Butter", "Buttermilk"]
    return callback


@pytest.fixture
def on_select():
    return MagicMock()


@pytest.fixture
def on_error():
    return MagicMock()


@pytest.fixture
def widget(root, items_callback, on_select, on_error):
    from src.ui.widgets.search_list import SearchList

    w = SearchList(
        master=root,
        items_callback=items_callback,
        on_select_callback=on_select,
        disabled_callback=lambda item: item == "Buttermilk",
        on_error=on_error,
        debounce_ms=50,
    )
    w.pack()
    yield w
    w.destroy()


def key(keysym="a"):
    return SimpleNamespace(keysym=keysym)


class TestDebounce:
    """Tests for the search timer."""

    def test_keystroke_schedules_search(self, widget, items_callback):
        widget.set_text("butt")
        widget._on_key_release(key())
        assert widget._debounce_id is not None
        items_callback.assert_not_called()

    def test_new_keystroke_replaces_timer(self, widget):
        widget.set_text("bu")
        widget._on_key_release(key())
        first = widget._debounce_id
        widget.set_text("but")
        widget._on_key_release(key())
        assert widget._debounce_id != first

    def test_navigation_keys_ignored(self, widget):
        widget._on_key_release(key("Down"))
        assert widget._debounce_id is None

    def test_destroy_cancels_timer(self, root, items_callback, on_select):
        from src.ui.widgets.search_list import SearchList

        w = SearchList(root, items_callback, on_select, debounce_ms=50)
        w.set_text("butter")
        w._on_key_release(key())
        w.destroy()
        assert w._debounce_id is None


class TestSearch:
    """Tests for running a search."""

    def test_search_now_uses_stripped_query(self, widget, items_callback):
        widget.set_text("  butter ")
        widget.search_now()
        items_callback.assert_called_once_with("butter")
        assert widget._debounce_id is None

    def test_blank_query_skips_callback(self, widget, items_callback):
        widget.search_now()
        items_callback.assert_not_called()
        assert widget._results == []

    def test_results_rendered_with_disabled_rows(self, widget):
        widget.set_text("butter")
        widget.search_now()

        buttons = widget._list_frame.winfo_children()
        assert [b.cget("text") for b in buttons] == ["Butter", "Buttermilk"]
        assert buttons[1].cget("state") == "disabled"

    def test_clicking_row_selects(self, widget, on_select):
        widget.set_text("butter")
        widget.search_now()
        widget._list_frame.winfo_children()[0].invoke()
        on_select.assert_called_once_with("Butter")

    def test_service_error_reported(self, widget, items_callback, on_error):
        items_callback.side_effect = ApiError("down", status_code=503)

        widget.set_text("butter")
        widget.search_now()

        exception, operation = on_error.call_args[0]
        assert isinstance(exception, ApiError)
        assert operation == "Search"
        assert widget._results == []
