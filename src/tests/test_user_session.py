"""Tests for UserSession login state."""

from unittest.mock import MagicMock

import pytest

from src.models.user import User
from src.services.exceptions import ApiError, NotLoggedIn, ValidationError
from src.services.user_session import UserSession
from src.tests.plan_factories import make_response


@pytest.fixture
def session(client):
    return UserSession(client)


class TestLogin:
    def test_login_posts_pin(self, session, http_session):
        http_session.request.return_value = make_response(data={"userId": 3, "username": "baker"})

        user = session.login("0420")

        args, kwargs = http_session.request.call_args
        assert args[:2] == ("POST", "http://bakery.test/api/users/login")
        assert kwargs["json"] == {"pin": "0420"}
        assert user == User(3, "baker")
        assert session.is_logged_in

    def test_malformed_pin_sends_nothing(self, session, http_session):
        with pytest.raises(ValidationError):
            session.login("12")
        http_session.request.assert_not_called()
        assert not session.is_logged_in

    def test_rejected_pin(self, session, http_session):
        http_session.request.return_value = make_response(status_code=401, result_code="UNAUTHORIZED", msg="Wrong PIN")
        with pytest.raises(ApiError):
            session.login("9999")
        assert session.user is None

    def test_listeners_notified(self, session, http_session):
        listener = MagicMock()
        session.add_listener(listener)
        http_session.request.return_value = make_response(data={"userId": 3, "username": "baker"})

        session.login("0420")

        listener.assert_called_once_with(User(3, "baker"))


class TestLogout:
    @pytest.fixture
    def logged_in(self, session, http_session):
        http_session.request.return_value = make_response(data={"userId": 3, "username": "baker"})
        session.login("0420")
        return session

    def test_logout_clears_user_and_cookies(self, logged_in, http_session):
        logged_in.logout()

        args, _ = http_session.request.call_args
        assert args[:2] == ("POST", "http://bakery.test/api/users/logout")
        assert logged_in.user is None
        http_session.cookies.clear.assert_called_once()

    def test_failed_logout_still_clears_state(self, logged_in, http_session):
        listener = MagicMock()
        logged_in.add_listener(listener)
        http_session.request.return_value = make_response(status_code=500, msg="boom")

        with pytest.raises(ApiError):
            logged_in.logout()

        assert logged_in.user is None
        listener.assert_called_once_with(None)


class TestRequireUser:
    def test_raises_when_logged_out(self, session):
        with pytest.raises(NotLoggedIn):
            session.require_user()
