"""REST client for the bakery backend.

Every backend response shares one envelope:

    {"resultCode": "OK" | <error code>, "msg": <message>, "data": <payload>}

ApiClient sends JSON requests over a single requests.Session (so the login
cookie rides along on every call) and unwraps the envelope. A non-2xx
status and a resultCode other than "OK" are treated the same way: an
ApiError carrying the server msg when one is available.

Usage:
    from src.services.api_client import ApiClient

    client = ApiClient()
    data = client.get("/api/plans/3")
"""

import logging
from typing import Any, Dict, Optional

import requests

from src.services.exceptions import ApiError, ApiTransportError
from src.services.logging_utils import get_service_logger, log_operation
from src.utils.config import get_config
from src.utils.constants import RESULT_CODE_OK

logger = get_service_logger(__name__)


class ApiClient:
    """
    Thin JSON client for the bakery backend.

    The client holds no plan state. It is created once at startup and
    passed to the service functions that need it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend root URL (defaults to config api_base_url)
            timeout: Request timeout in seconds (defaults to config)
            session: Pre-built requests.Session, mainly for tests
        """
        config = get_config()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def url(self, path: str) -> str:
        """Join a path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    # ------------------------------------------------------------------
    # HTTP verbs
    # ------------------------------------------------------------------

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request and return the envelope's data.

        Args:
            method: HTTP method
            path: Path below the base URL, e.g. "/api/plans/3"
            json: JSON body (omitted when None)
            params: Query parameters

        Returns:
            The "data" member of the response envelope (may be None)

        Raises:
            ApiTransportError: If the backend could not be reached
            ApiError: If the status is not 2xx or resultCode is not "OK"
        """
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if json is not None:
            kwargs["json"] = json
        if params:
            kwargs["params"] = params

        try:
            response = self.session.request(method, self.url(path), **kwargs)
        except requests.RequestException as e:
            log_operation(
                logger,
                operation=f"{method} {path}",
                outcome="transport_error",
                level=logging.ERROR,
                error=str(e),
            )
            raise ApiTransportError(f"Could not reach the server: {e}", original_error=e) from e

        body = self._decode(response)

        if not response.ok:
            message = (body or {}).get("msg") or f"Request failed ({response.status_code})"
            log_operation(
                logger,
                operation=f"{method} {path}",
                outcome="http_error",
                level=logging.WARNING,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(
                message,
                status_code=response.status_code,
                result_code=(body or {}).get("resultCode"),
            )

        if body is None:
            raise ApiError("Server returned an unreadable response", status_code=response.status_code)

        result_code = body.get("resultCode")
        if result_code != RESULT_CODE_OK:
            message = body.get("msg") or "Server reported an error"
            log_operation(
                logger,
                operation=f"{method} {path}",
                outcome="result_error",
                level=logging.WARNING,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(message, status_code=response.status_code, result_code=result_code)

        log_operation(
            logger,
            operation=f"{method} {path}",
            outcome="success",
            level=logging.DEBUG,
            status_code=response.status_code,
        )
        return body.get("data")

    @staticmethod
    def _decode(response: requests.Response) -> Optional[Dict[str, Any]]:
        """Parse the JSON envelope; None if the body is missing or not an object."""
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
