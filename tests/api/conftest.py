"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from profilekit.interfaces.api.app import create_app


@pytest.fixture
def app(registry, factory):
    """Falcon ASGI app wired to the per-test registry and factory."""
    return create_app(registry, factory)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
