"""
User session context for the logged-in baker.

A UserSession is created once at startup and passed to the windows that
need to know who is logged in. Unlike a module-level singleton, each
session owns its state explicitly and changes it only through login()
and logout().

The backend authenticates by cookie; the cookie lives in the ApiClient's
requests.Session, so logging out also clears that cookie jar.

Usage:
    session = UserSession(client)
    session.login("1234")
    session.user.username
    session.logout()
"""

from typing import Callable, List, Optional

from src.models.user import User
from src.services.api_client import ApiClient
from src.services.exceptions import NotLoggedIn, ValidationError
from src.services.logging_utils import get_service_logger, log_operation
from src.utils.validators import validate_pin

logger = get_service_logger(__name__)


class UserSession:
    """
    Explicit login state shared by the application windows.

    Listeners registered with add_listener() are called with the new user
    (or None) after every login and logout.
    """

    def __init__(self, client: ApiClient):
        self._client = client
        self._user: Optional[User] = None
        self._listeners: List[Callable[[Optional[User]], None]] = []

    @property
    def user(self) -> Optional[User]:
        """The logged-in user, or None."""
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    def require_user(self) -> User:
        """
        Return the logged-in user.

        Raises:
            NotLoggedIn: If nobody is logged in
        """
        if self._user is None:
            raise NotLoggedIn()
        return self._user

    def add_listener(self, listener: Callable[[Optional[User]], None]) -> None:
        self._listeners.append(listener)

    def login(self, pin: str) -> User:
        """
        Log in with a PIN.

        Args:
            pin: Digits entered on the PIN pad

        Returns:
            The logged-in user

        Raises:
            ValidationError: If the PIN is malformed (no request is made)
            ApiError: If the backend rejects the PIN
        """
        is_valid, error = validate_pin(pin)
        if not is_valid:
            raise ValidationError([error])

        data = self._client.post("/api/users/login", json={"pin": pin})
        self._user = User.from_api(data or {})
        log_operation(logger, operation="login", outcome="success", user_id=self._user.user_id)
        self._notify()
        return self._user

    def logout(self) -> None:
        """
        Log out on the backend and forget the local user.

        The local state is cleared even if the backend call fails, and the
        failure is re-raised for the caller to report.
        """
        try:
            self._client.post("/api/users/logout")
        finally:
            self._user = None
            self._client.session.cookies.clear()
            log_operation(logger, operation="logout", outcome="done")
            self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._user)
