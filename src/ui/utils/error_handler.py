"""Error reporting for the plan client windows.

Every failure the user should hear about goes through handle_error():
the exception becomes a (title, message) pair worded for a baker, the
technical details go to the log, and a message box is shown.

The plan detail controller never imports tkinter; it receives an
on_error(exception, operation) callable built by make_error_callback().
"""

import logging
from tkinter import messagebox
from typing import Any, Callable, Dict, Optional, Tuple

from src.services.exceptions import (
    ServiceError,
    ValidationError,
    EditRejected,
    PlanCompleteError,
    ApiError,
    ApiTransportError,
    NotLoggedIn,
)

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[Exception, str], Tuple[str, str]]


def handle_error(
    exception: Exception,
    parent: Optional[Any] = None,
    operation: str = "Operation",
    show_dialog: bool = True,
) -> Tuple[str, str]:
    """Report an exception to the user and the log.

    Args:
        exception: The exception that stopped the operation
        parent: Window the message box belongs to (optional)
        operation: What the user was doing, e.g. "Save ingredients"
        show_dialog: False to only log and return the text

    Returns:
        (title, message) as shown to the user

    Example:
        try:
            plan_service.delete_plan(client, plan_id)
        except ServiceError as e:
            handle_error(e, parent=self, operation="Delete plan")
    """
    title, message = get_user_message(exception, operation)
    _log_error(exception, operation)

    if show_dialog:
        if parent is None:
            messagebox.showerror(title, message)
        else:
            messagebox.showerror(title, message, parent=parent)

    return title, message


def make_error_callback(parent: Optional[Any] = None) -> ErrorCallback:
    """Bind handle_error to a parent widget for use as a controller on_error callback."""

    def on_error(exception: Exception, operation: str) -> Tuple[str, str]:
        return handle_error(exception, parent=parent, operation=operation)

    return on_error


def get_user_message(exception: Exception, operation: str = "Operation") -> Tuple[str, str]:
    """Word an exception for the user without showing anything.

    The most specific exception class wins, so PlanCompleteError and
    EditRejected are checked before ValidationError, and
    ApiTransportError before ApiError. Class names never appear in the
    returned text.

    Args:
        exception: The exception to describe
        operation: What the user was doing

    Returns:
        (title, message)
    """
    if isinstance(exception, PlanCompleteError):
        return "Plan Complete", f"Cannot {exception.attempted_action}: this plan is complete."

    if isinstance(exception, EditRejected):
        return "Not Allowed", exception.reason

    if isinstance(exception, ValidationError):
        return "Check Input", "\n".join(str(e) for e in exception.errors) or str(exception)

    if isinstance(exception, NotLoggedIn):
        return "Login Required", "Please log in with your PIN first."

    if isinstance(exception, ApiTransportError):
        return (
            "Connection Error",
            f"{operation} failed: the server could not be reached. Please try again.",
        )

    if isinstance(exception, ApiError):
        return _api_error_message(exception, operation)

    if isinstance(exception, ServiceError):
        return _fallback_message(exception, operation)

    return "Unexpected Error", "An unexpected error occurred. Please contact support."


def _api_error_message(exception: ApiError, operation: str) -> Tuple[str, str]:
    if exception.status_code == 401:
        return "Login Required", "Your login has expired. Please log in again."
    if exception.status_code == 404:
        return "Not Found", f"{operation} failed: {exception.message or 'not found'}"
    reason = exception.message or "the server refused the request"
    return "Request Failed", f"{operation} failed: {reason}"


def _fallback_message(exception: ServiceError, operation: str) -> Tuple[str, str]:
    status = getattr(exception, "http_status_code", 500)
    if status == 404:
        return "Not Found", f"{operation} failed: the requested item was not found."
    if status == 409:
        return "Conflict", f"{operation} failed: {exception.message or 'resource conflict'}"
    return "Error", f"{operation} failed: {exception.message or 'an error occurred'}"


def _log_error(exception: Exception, operation: str) -> None:
    """Log what went wrong.

    Input the user can fix is a WARNING. Other service failures are ERROR
    records carrying an error_data dict. Anything else is logged with its
    traceback.
    """
    if isinstance(exception, ValidationError):
        logger.warning(f"{operation} rejected: {exception}")
        return

    if not isinstance(exception, ServiceError):
        logger.exception(
            f"{operation} failed with unexpected error: {exception.__class__.__name__}"
        )
        return

    error_data: Dict[str, Any] = {
        "operation": operation,
        "exception_type": exception.__class__.__name__,
        "message": str(exception),
        "http_status_code": getattr(exception, "http_status_code", 500),
    }
    if isinstance(exception, ApiError):
        error_data["status_code"] = exception.status_code
        error_data["result_code"] = exception.result_code
    if exception.context:
        error_data["context"] = exception.context

    logger.error(
        f"{operation} failed: {exception.__class__.__name__}: {exception}",
        extra={"error_data": error_data},
    )
