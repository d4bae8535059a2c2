"""Unit tests for Config class configuration properties.

Tests cover:
- Backend connection settings (api_base_url, request_timeout)
- Environment mode and log level
- The get_config() singleton

Each property is tested for its default, its environment variable
override, and invalid value handling where applicable.
"""

import logging

from src.utils.config import Config, get_config, reset_config
from src.utils.constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT


class TestConnectionProperties:
    """Tests for backend connection settings."""

    def test_api_base_url_default(self):
        config = Config()
        assert config.api_base_url == DEFAULT_API_BASE_URL

    def test_api_base_url_env_override_strips_slash(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_API_URL", "https://bakery.example.com/")
        config = Config()
        assert config.api_base_url == "https://bakery.example.com"

    def test_request_timeout_default(self):
        assert Config().request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_request_timeout_env_override(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_TIMEOUT", "2.5")
        assert Config().request_timeout == 2.5

    def test_request_timeout_invalid_uses_default(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_TIMEOUT", "soon")
        assert Config().request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_request_timeout_non_positive_uses_default(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_TIMEOUT", "0")
        assert Config().request_timeout == DEFAULT_REQUEST_TIMEOUT


class TestEnvironment:
    """Tests for environment mode and log level."""

    def test_production_defaults_to_info(self):
        config = Config("production")
        assert config.is_production
        assert config.log_level == logging.INFO

    def test_development_defaults_to_debug(self):
        config = Config("development")
        assert config.is_development
        assert config.log_level == logging.DEBUG

    def test_log_level_env_override(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_LOG_LEVEL", "warning")
        assert Config().log_level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_LOG_LEVEL", "chatty")
        assert Config().log_level == logging.INFO

    def test_repr(self):
        assert "api_base_url" in repr(Config())


class TestGetConfig:
    """Tests for the configuration singleton."""

    def test_returns_same_instance(self):
        assert get_config() is get_config()

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("BAKE_PLAN_ENV", "development")
        reset_config()
        assert get_config().is_development

    def test_mismatched_environment_warns(self, caplog):
        get_config("production")
        with caplog.at_level(logging.WARNING):
            config = get_config("development")
        assert config.is_production
        assert "singleton" in caplog.text

    def test_reset_creates_new_instance(self):
        first = get_config()
        reset_config()
        assert get_config() is not first
