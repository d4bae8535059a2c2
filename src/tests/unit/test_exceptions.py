"""Unit tests for exception hierarchy.

Validates that all exceptions inherit from ServiceError and carry the
attributes the error handler relies on.
"""

import inspect

import pytest

from src.services import exceptions as exc_module
from src.services.exceptions import (
    ApiError,
    ApiTransportError,
    EditRejected,
    NotLoggedIn,
    PlanCompleteError,
    ServiceError,
    ValidationError,
)


def get_all_exception_classes():
    """Discover all exception classes in the exceptions module."""
    return [
        (name, obj)
        for name, obj in inspect.getmembers(exc_module, inspect.isclass)
        if issubclass(obj, Exception) and obj.__module__ == exc_module.__name__
    ]


@pytest.mark.parametrize("name, cls", get_all_exception_classes())
def test_inherits_from_service_error(name, cls):
    assert issubclass(cls, ServiceError), f"{name} must inherit from ServiceError"


@pytest.mark.parametrize("name, cls", get_all_exception_classes())
def test_has_http_status_code(name, cls):
    assert isinstance(cls.http_status_code, int)


class TestValidationError:
    def test_joins_errors(self):
        exc = ValidationError(["Name is required", "Unit is required"])
        assert exc.errors == ["Name is required", "Unit is required"]
        assert str(exc) == "Name is required; Unit is required"
        assert exc.http_status_code == 400

    def test_edit_rejected_is_validation(self):
        exc = EditRejected("A recipe needs at least one part.")
        assert isinstance(exc, ValidationError)
        assert exc.reason == "A recipe needs at least one part."
        assert exc.errors == [exc.reason]

    def test_plan_complete_error(self):
        exc = PlanCompleteError(7, "add part")
        assert isinstance(exc, ValidationError)
        assert exc.plan_id == 7
        assert exc.http_status_code == 409
        assert "add part" in str(exc)


class TestApiError:
    def test_status_code_drives_http_status(self):
        exc = ApiError("Plan not found", status_code=404, result_code="NOT_FOUND")
        assert exc.http_status_code == 404
        assert exc.message == "Plan not found"

    def test_result_code_error_on_success_status(self):
        exc = ApiError("Already added", status_code=200, result_code="DUPLICATE")
        assert exc.http_status_code == 500

    def test_transport_error(self):
        original = OSError("refused")
        exc = ApiTransportError("Could not reach the server", original_error=original)
        assert isinstance(exc, ApiError)
        assert exc.original_error is original
        assert exc.status_code is None
        assert exc.http_status_code == 503


def test_not_logged_in_default_message():
    exc = NotLoggedIn()
    assert exc.http_status_code == 401
    assert "log in" in exc.message
