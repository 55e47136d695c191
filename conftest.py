"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

SETTINGS_ENV_VARS = ("SHA_256", "ENVIRONMENT", "APP_VERSION", "DOMAIN", "API_URL", "LOG_LEVEL", "APP_STORE_URL")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "http: mark test as going through the FastAPI app")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against default settings unless it sets its own env."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def client():
    """TestClient for the deep-link app."""
    from api.deeplink.app import create_app

    with TestClient(create_app(), follow_redirects=False) as test_client:
        yield test_client
