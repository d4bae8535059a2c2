"""Services package - Business logic layer for the Bakery Plan Client.

This package contains the service modules that talk to the bakery
backend and the planning logic that runs between those calls.

Architecture:
- Services: Stateless functions organized by domain (plan, recipe, ingredient)
- Transport: One ApiClient per application, passed to every service call
- Exceptions: Consistent error handling via ServiceError hierarchy
- Validation: Input validation before any request is made

Service Modules:
- plan_service: Plan CRUD, recipe scaling and ingredient updates
- recipe_service: Recipe search for adding recipes to a plan
- ingredient_service: Ingredient search for picking and replacing lines
- user_session: PIN login and logout

Infrastructure:
- api_client: HTTP transport and result envelope handling
- exceptions: Custom exception classes for service layer errors
- logging_utils: Standardized service logging
- planning: Scaling, editing and refresh-cycle logic
"""

from . import (
    api_client,
    ingredient_service,
    plan_service,
    recipe_service,
    user_session,
)

from .api_client import ApiClient
from .user_session import UserSession

# Exceptions
from .exceptions import (
    ServiceError,
    ValidationError,
    EditRejected,
    PlanCompleteError,
    ApiError,
    ApiTransportError,
    NotLoggedIn,
)

__all__ = [
    # Modules
    "api_client",
    "ingredient_service",
    "plan_service",
    "recipe_service",
    "user_session",
    # Classes
    "ApiClient",
    "UserSession",
    # Exceptions
    "ServiceError",
    "ValidationError",
    "EditRejected",
    "PlanCompleteError",
    "ApiError",
    "ApiTransportError",
    "NotLoggedIn",
]
