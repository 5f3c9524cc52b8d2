"""HTTP API client for the auth and prediction service."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from .config import get_config, AppConfig
from .constants import (
    IMAGE_FIELD,
    LOGIN_PATH,
    PREDICT_PATH,
    REGISTER_PATH,
    SAVE_PATH,
    USERNAME_PATH,
)
from .core.exceptions import ApiError, AuthorizationError, ServerError
from .core.models import Credentials, UploadedImage

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Synchronous HTTP client for the backend.

    A single ``requests.Session`` carries the auth cookie across calls, so a
    login is visible to later predict and save requests.
    """

    def __init__(self, config: Optional[AppConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or get_config()
        self.base_url = self.config.api_base_url.rstrip("/")
        self.timeout = self.config.api_timeout_sec
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        """Build full URL from path."""
        return f"{self.base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """Make HTTP request and return JSON response."""
        url = self._url(path)
        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json,
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response.json() if response.content else {}
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code
            detail = _error_message(e.response)
            error_msg = detail or str(e)
            if status_code == 401:
                raise AuthorizationError(status_code, error_msg, detail=detail) from e
            raise ServerError(status_code, error_msg, detail=detail) from e
        except requests.exceptions.JSONDecodeError as e:
            raise ServerError(0, f"Invalid JSON from {path}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise ServerError(0, f"Connection error: {e}") from e

    def _get(self, path: str) -> Dict[str, Any]:
        """HTTP GET request."""
        return self._request("GET", path)

    def _post(self, path: str, json: Optional[Dict] = None, **kwargs) -> Dict[str, Any]:
        """HTTP POST request."""
        return self._request("POST", path, json=json, **kwargs)

    # Health check
    def health_check(self) -> bool:
        """Check if the API is reachable."""
        try:
            self._get("/")
            return True
        except ApiError as e:
            logger.debug(f"Health check failed: {e}")
            return False

    # Auth operations
    def register(self, credentials: Credentials) -> Dict[str, Any]:
        """Create a new account."""
        return self._post(REGISTER_PATH, json=credentials.to_payload())

    def login(self, credentials: Credentials) -> Dict[str, Any]:
        """Log in; the session cookie is stored on ``self.session``."""
        return self._post(LOGIN_PATH, json=credentials.to_payload())

    def get_username(self) -> Optional[str]:
        """Get the display name of the logged-in user."""
        data = self._get(USERNAME_PATH)
        if not isinstance(data, dict):
            raise ServerError(0, f"Unexpected response from {USERNAME_PATH}: {data!r}")
        return data.get("username")

    # Prediction operations
    def predict(self, image: UploadedImage) -> Dict[str, Any]:
        """Upload an image and return the predictor's response."""
        files = {IMAGE_FIELD: (image.filename, image.content, image.content_type)}
        return self._post(PREDICT_PATH, files=files)

    def save_prediction(self, title: str, confidence: str, image_src: str) -> Dict[str, Any]:
        """Store a prediction for the logged-in user."""
        return self._post(
            SAVE_PATH,
            json={
                "title": title,
                "confidence": confidence,
                "image_src": image_src,
            },
        )

    def image_url(self, src: str) -> str:
        """Resolve a server-relative image path against the base URL."""
        if not src:
            return src
        return urljoin(f"{self.base_url}/", src)


def _error_message(response: Optional[requests.Response]) -> Optional[str]:
    """Pull the service's error text out of a failed response."""
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return data.get("error") or data.get("detail")


# Global client instance
_client: Optional[ApiClient] = None


def get_client() -> ApiClient:
    """Get the global API client instance."""
    global _client
    if _client is None:
        _client = ApiClient()
    return _client


def set_client(client: ApiClient) -> None:
    """Set the global API client instance."""
    global _client
    _client = client
