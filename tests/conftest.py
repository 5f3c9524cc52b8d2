"""Shared fixtures for classifier client tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from classifier_app.api_client import ApiClient
from classifier_app.config import AppConfig
from classifier_app.core.auth import AuthSession
from classifier_app.core.keyboard import KeyboardListener
from classifier_app.core.uploader import PredictionUploader
from classifier_app.core.models import UploadedImage


def make_response(status_code: int = 200, body=None, url: str = "http://api.test/") -> requests.Response:
    """Build a real requests.Response with a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


@pytest.fixture
def client():
    """Mock ApiClient; each test sets the return values it needs."""
    return MagicMock(spec=ApiClient)


@pytest.fixture
def auth(client):
    return AuthSession(client)


@pytest.fixture
def uploader(client):
    return PredictionUploader(client)


@pytest.fixture
def keyboard():
    return KeyboardListener()


@pytest.fixture
def image():
    return UploadedImage(filename="cat.png", content=b"\x89PNG fake", content_type="image/png")


@pytest.fixture
def http_session():
    """Mock requests.Session for ApiClient tests."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(http_session):
    config = AppConfig(api_base_url="http://api.test/", api_timeout_sec=5)
    return ApiClient(config=config, session=http_session)
