"""Tests for the backend REST client and its envelope handling."""

import logging

import pytest
import requests

from src.services.api_client import ApiClient
from src.services.exceptions import ApiError, ApiTransportError
from src.tests.plan_factories import make_response
from src.utils.config import reset_config


class TestRequestShape:
    """Tests for what the client puts on the wire."""

    def test_get_joins_url_and_passes_timeout(self, client, http_session):
        http_session.request.return_value = make_response(data={"planId": 3})

        client.get("/api/plans/3")

        http_session.request.assert_called_once_with(
            "GET", "http://bakery.test/api/plans/3", timeout=5
        )

    def test_params_are_sent_as_query(self, client, http_session):
        client.get("/api/plans", params={"page": 2})
        _, kwargs = http_session.request.call_args
        assert kwargs["params"] == {"page": 2}

    def test_json_body_is_sent(self, client, http_session):
        client.patch("/api/plans/3/memo", json={"newMemo": "hi"})
        args, kwargs = http_session.request.call_args
        assert args[0] == "PATCH"
        assert kwargs["json"] == {"newMemo": "hi"}

    def test_no_body_when_json_is_none(self, client, http_session):
        client.delete("/api/plans/3")
        _, kwargs = http_session.request.call_args
        assert "json" not in kwargs

    def test_trailing_slash_on_base_url(self, http_session):
        client = ApiClient("http://bakery.test/", timeout=5, session=http_session)
        assert client.url("api/plans") == "http://bakery.test/api/plans"

    def test_defaults_from_config(self, monkeypatch, http_session):
        monkeypatch.setenv("BAKE_PLAN_API_URL", "http://oven.local:9000/")
        monkeypatch.setenv("BAKE_PLAN_TIMEOUT", "3")
        reset_config()

        client = ApiClient(session=http_session)

        assert client.base_url == "http://oven.local:9000"
        assert client.timeout == 3.0

    def test_accept_header_set(self, client, http_session):
        assert http_session.headers["Accept"] == "application/json"


class TestEnvelope:
    """Tests for unwrapping {resultCode, msg, data}."""

    def test_returns_data(self, client, http_session):
        http_session.request.return_value = make_response(data={"planId": 3})
        assert client.get("/api/plans/3") == {"planId": 3}

    def test_returns_none_data(self, client, http_session):
        http_session.request.return_value = make_response(data=None)
        assert client.delete("/api/plans/3") is None

    def test_http_error_carries_server_msg(self, client, http_session):
        http_session.request.return_value = make_response(
            status_code=404, result_code="NOT_FOUND", msg="Plan not found"
        )

        with pytest.raises(ApiError) as exc_info:
            client.get("/api/plans/99")

        assert exc_info.value.message == "Plan not found"
        assert exc_info.value.status_code == 404
        assert exc_info.value.result_code == "NOT_FOUND"

    def test_http_error_without_body(self, client, http_session):
        http_session.request.return_value = make_response(status_code=502, body=ValueError("no json"))

        with pytest.raises(ApiError) as exc_info:
            client.get("/api/plans/3")

        assert "502" in exc_info.value.message

    def test_result_code_error_on_200(self, client, http_session):
        http_session.request.return_value = make_response(result_code="DUPLICATE", msg="Already added")

        with pytest.raises(ApiError) as exc_info:
            client.post("/api/plans/3/recipes", json={"recipeId": 1})

        assert exc_info.value.message == "Already added"
        assert exc_info.value.result_code == "DUPLICATE"
        assert exc_info.value.status_code == 200

    def test_unreadable_success_body(self, client, http_session):
        http_session.request.return_value = make_response(body=ValueError("bad json"))
        with pytest.raises(ApiError, match="unreadable"):
            client.get("/api/plans/3")

    def test_non_object_body_is_unreadable(self, client, http_session):
        http_session.request.return_value = make_response(body=["not", "an", "envelope"])
        with pytest.raises(ApiError):
            client.get("/api/plans/3")

    def test_transport_error(self, client, http_session):
        http_session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ApiTransportError) as exc_info:
            client.get("/api/plans/3")

        assert isinstance(exc_info.value.original_error, requests.ConnectionError)
        assert exc_info.value.status_code is None

    def test_timeout_is_transport_error(self, client, http_session):
        http_session.request.side_effect = requests.Timeout("slow")
        with pytest.raises(ApiTransportError):
            client.get("/api/plans/3")


class TestLogging:
    """Tests for request outcome logging."""

    def test_http_error_logged_as_warning(self, client, http_session, caplog):
        http_session.request.return_value = make_response(status_code=500, msg="boom")

        with caplog.at_level(logging.WARNING, logger="bake_plan.services.api_client"):
            with pytest.raises(ApiError):
                client.get("/api/plans/3")

        assert "GET /api/plans/3: http_error" in caplog.text

    def test_transport_error_logged_as_error(self, client, http_session, caplog):
        http_session.request.side_effect = requests.ConnectionError("refused")

        with caplog.at_level(logging.ERROR, logger="bake_plan.services.api_client"):
            with pytest.raises(ApiTransportError):
                client.get("/api/plans/3")

        record = caplog.records[-1]
        assert record.outcome == "transport_error"
        assert "refused" in record.error


class TestClose:
    def test_close_closes_session(self, client, http_session):
        client.close()
        http_session.close.assert_called_once()
