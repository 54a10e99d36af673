from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from brandproxy.config import ProxySettings, get_settings, reset_settings
from main import app

SERVER_KEY = "server-test-key"


@pytest.fixture
def make_client():
    """Builds a TestClient whose settings dependency returns the given fake settings."""
    def _make(settings: ProxySettings) -> TestClient:
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def server_key() -> str:
    return SERVER_KEY


@pytest.fixture
def client(make_client, server_key) -> TestClient:
    return make_client(ProxySettings(brandfetch_api_key=server_key))


@pytest.fixture
def keyless_client(make_client) -> TestClient:
    return make_client(ProxySettings(brandfetch_api_key=None))


@pytest.fixture
def clean_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()
