"""Unit tests for centralized error handler."""

import logging
import pytest
from unittest.mock import patch, MagicMock

from src.ui.utils.error_handler import handle_error, get_user_message, make_error_callback
from src.services.exceptions import (
    ServiceError,
    ValidationError,
    EditRejected,
    PlanCompleteError,
    ApiError,
    ApiTransportError,
    NotLoggedIn,
)


class TestGetUserMessage:
    """Tests for exception to user message mapping."""

    def test_plan_complete(self):
        exc = PlanCompleteError(7, "add part")
        title, msg = get_user_message(exc, "Add part")
        assert title == "Plan Complete"
        assert "add part" in msg

    def test_edit_rejected(self):
        exc = EditRejected("Each part needs at least one ingredient.")
        title, msg = get_user_message(exc, "Remove ingredient")
        assert title == "Not Allowed"
        assert msg == "Each part needs at least one ingredient."

    def test_validation_error_with_errors_list(self):
        exc = ValidationError(["Enter a valid goal quantity.", "Enter a percentage for every part."])
        title, msg = get_user_message(exc, "Change scale")
        assert title == "Check Input"
        assert msg == "Enter a valid goal quantity.\nEnter a percentage for every part."

    def test_not_logged_in(self):
        title, _ = get_user_message(NotLoggedIn(), "Load plans")
        assert title == "Login Required"

    def test_transport_error(self):
        exc = ApiTransportError("Could not reach the server: refused")
        title, msg = get_user_message(exc, "Load plan")
        assert title == "Connection Error"
        assert msg.startswith("Load plan failed")

    def test_api_error_401(self):
        title, _ = get_user_message(ApiError("expired", status_code=401), "Load plan")
        assert title == "Login Required"

    def test_api_error_404(self):
        title, msg = get_user_message(ApiError("Plan not found", status_code=404), "Load plan")
        assert title == "Not Found"
        assert "Plan not found" in msg

    def test_api_error_shows_server_message(self):
        exc = ApiError("Unknown ingredient: Margarine", status_code=400, result_code="INVALID")
        title, msg = get_user_message(exc, "Save ingredients")
        assert title == "Request Failed"
        assert msg == "Save ingredients failed: Unknown ingredient: Margarine"

    def test_api_error_without_message(self):
        title, msg = get_user_message(ApiError("", status_code=500), "Save memo")
        assert title == "Request Failed"
        assert "refused" in msg

    def test_generic_service_error_fallback(self):
        title, msg = get_user_message(ServiceError("Something broke"), "Operation")
        assert title == "Error"
        assert "Something broke" in msg

    def test_service_error_409_fallback(self):
        exc = ServiceError("Conflict")
        exc.http_status_code = 409
        title, _ = get_user_message(exc, "Operation")
        assert title == "Conflict"

    def test_unexpected_exception(self):
        title, msg = get_user_message(RuntimeError("boom"), "Operation")
        assert title == "Unexpected Error"
        assert "boom" not in msg
        assert "RuntimeError" not in msg  # No class names

    def test_no_python_exception_names_exposed(self):
        """Verify no exception class names leak to user messages."""
        exceptions = [
            PlanCompleteError(1, "edit"),
            EditRejected("no"),
            ValidationError(["bad"]),
            NotLoggedIn(),
            ApiTransportError("down"),
            ApiError("failed", status_code=500),
            ServiceError("x"),
        ]
        for exc in exceptions:
            _, msg = get_user_message(exc, "Operation")
            assert exc.__class__.__name__ not in msg


class TestHandleError:
    """Tests for handle_error function."""

    @patch("src.ui.utils.error_handler.messagebox")
    def test_shows_dialog_by_default(self, mock_msgbox):
        handle_error(ServiceError("x"), operation="Test")
        mock_msgbox.showerror.assert_called_once()

    @patch("src.ui.utils.error_handler.messagebox")
    def test_no_dialog_when_disabled(self, mock_msgbox):
        handle_error(ServiceError("x"), operation="Test", show_dialog=False)
        mock_msgbox.showerror.assert_not_called()

    @patch("src.ui.utils.error_handler.messagebox")
    def test_dialog_with_parent(self, mock_msgbox):
        parent = MagicMock()
        handle_error(ServiceError("x"), parent=parent, operation="Test")
        _, kwargs = mock_msgbox.showerror.call_args
        assert kwargs["parent"] is parent

    @patch("src.ui.utils.error_handler.messagebox")
    def test_returns_title_and_message(self, mock_msgbox):
        title, msg = handle_error(EditRejected("no"), operation="Test")
        assert (title, msg) == ("Not Allowed", "no")

    @patch("src.ui.utils.error_handler.messagebox")
    def test_error_callback_binds_parent(self, mock_msgbox):
        parent = MagicMock()
        on_error = make_error_callback(parent)

        title, _ = on_error(ValidationError(["bad"]), "Save ingredients")

        assert title == "Check Input"
        _, kwargs = mock_msgbox.showerror.call_args
        assert kwargs["parent"] is parent

    def test_logs_validation_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            handle_error(ValidationError(["bad"]), operation="Save", show_dialog=False)
        assert caplog.records[-1].levelno == logging.WARNING
        assert "Save rejected" in caplog.text

    def test_logs_api_error_with_codes(self, caplog):
        exc = ApiError("boom", status_code=500, result_code="ERROR")
        with caplog.at_level(logging.ERROR):
            handle_error(exc, operation="Load plan", show_dialog=False)
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.error_data["status_code"] == 500
        assert record.error_data["result_code"] == "ERROR"

    def test_logs_unexpected_error_with_traceback(self, caplog):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            with caplog.at_level(logging.ERROR):
                handle_error(e, operation="Test", show_dialog=False)
        assert caplog.records[-1].exc_info is not None


class TestEdgeCases:
    """Tests for edge cases."""

    def test_empty_validation_errors(self):
        title, _ = get_user_message(ValidationError([]), "Operation")
        assert title == "Check Input"
