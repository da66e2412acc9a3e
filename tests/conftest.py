"""Shared fixtures for the test suite."""

import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings


class RecordingTransport(httpx.MockTransport):
    """Mock upstream that answers with a fixed response and records requests."""

    def __init__(self, status_code=200, json=None, content=None, exc=None):
        self.requests = []
        self._status_code = status_code
        self._json = json
        self._content = content
        self._exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._exc is not None:
            raise self._exc
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._json)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's real key out of the tests."""
    for name in ("SPOONACULAR_API_KEY", "RECIPE_SPOONACULAR_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    """Settings with a test API key."""
    return Settings(_env_file=None, spoonacular_api_key="test-key")


@pytest.fixture
def settings_without_key():
    """Settings with no API key configured."""
    return Settings(_env_file=None)


@pytest.fixture
def sample_recipe():
    return {"id": 1, "title": "Oatmeal"}
