"""
Configuration management for the Bakery Plan Client application.

This module handles:
- Backend API location and request timeout
- Environment-specific configuration (development vs. production)
- Log level selection
"""

import logging
import os
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
)

ENV_ENVIRONMENT = "BAKE_PLAN_ENV"
ENV_API_URL = "BAKE_PLAN_API_URL"
ENV_TIMEOUT = "BAKE_PLAN_TIMEOUT"
ENV_LOG_LEVEL = "BAKE_PLAN_LOG_LEVEL"


class Config:
    """
    Application configuration manager.

    Handles the backend connection settings and environment mode.
    Values come from environment variables, falling back to defaults.
    """

    def __init__(self, environment: str = "production"):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        self._api_base_url = os.environ.get(ENV_API_URL, DEFAULT_API_BASE_URL).rstrip("/")
        self._request_timeout = self._read_timeout()
        default_level = "DEBUG" if environment == "development" else "INFO"
        self._log_level = os.environ.get(ENV_LOG_LEVEL, default_level).upper()

    def _read_timeout(self) -> float:
        """
        Read the request timeout from the environment.

        Returns:
            Timeout in seconds; the default when unset or not a positive number
        """
        raw = os.environ.get(ENV_TIMEOUT)
        if not raw:
            return DEFAULT_REQUEST_TIMEOUT
        try:
            value = float(raw)
        except ValueError:
            return DEFAULT_REQUEST_TIMEOUT
        return value if value > 0 else DEFAULT_REQUEST_TIMEOUT

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def api_base_url(self) -> str:
        """Base URL of the bakery backend, without trailing slash."""
        return self._api_base_url

    @property
    def request_timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self._request_timeout

    @property
    def log_level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self._log_level, logging.INFO)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', " f"api_base_url='{self._api_base_url}')"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    BAKE_PLAN_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_ENVIRONMENT, "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger = logging.getLogger(__name__)
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
