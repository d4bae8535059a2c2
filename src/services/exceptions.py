"""Service layer exception classes for the Bakery Plan Client.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError          client-side input validation failed
    │   ├── EditRejected         edit refused by a plan-editing rule
    │   └── PlanCompleteError    edit attempted on a completed plan
    ├── ApiError                 non-2xx status or resultCode != "OK"
    │   └── ApiTransportError    request never got a response
    └── NotLoggedIn              operation requires a logged-in user
"""

from typing import Any, Dict, List, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.

    Attributes:
        message: Human-readable message
        http_status_code: Closest HTTP status for the failure category
        context: Extra structured data for logging
    """

    http_status_code = 500

    def __init__(self, message: str = "", context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class ValidationError(ServiceError):
    """Raised when data validation fails.

    Validation errors never reach the network.

    Args:
        errors: One or more user-facing messages

    Example:
        >>> raise ValidationError(["Enter a valid goal quantity."])
        ValidationError: Enter a valid goal quantity.
    """

    http_status_code = 400

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class EditRejected(ValidationError):
    """Raised when an edit would break a recipe structure rule.

    Covers removing the last part, removing the last ingredient of a part,
    and moving an ingredient across parts.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__([reason])


class PlanCompleteError(ValidationError):
    """Raised when editing is attempted on a completed plan.

    Args:
        plan_id: The completed plan's ID
        attempted_action: What the user tried to do
    """

    http_status_code = 409

    def __init__(self, plan_id: Optional[int], attempted_action: str):
        self.plan_id = plan_id
        self.attempted_action = attempted_action
        super().__init__([f"Cannot {attempted_action}: plan is complete"])


class ApiError(ServiceError):
    """Raised when the backend rejects a request.

    Both a non-2xx HTTP status and an envelope whose resultCode is not "OK"
    are reported with this exception.

    Args:
        message: Server-provided msg, or a generic description
        status_code: HTTP status code (None if the request never completed)
        result_code: Envelope resultCode, if a body was received

    Example:
        >>> raise ApiError("Plan not found", status_code=404, result_code="NOT_FOUND")
        ApiError: Plan not found
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        result_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.result_code = result_code
        if status_code is not None and status_code >= 400:
            self.http_status_code = status_code
        super().__init__(message, context=context)


class ApiTransportError(ApiError):
    """Raised when the backend could not be reached (connection, timeout)."""

    http_status_code = 503

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class NotLoggedIn(ServiceError):
    """Raised when an operation needs a logged-in user and there is none."""

    http_status_code = 401

    def __init__(self, message: str = "Please log in first"):
        super().__init__(message)
