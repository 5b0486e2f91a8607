"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from permstore.domain.entities import AdminStore
from permstore.interfaces.api.app import create_app


@pytest.fixture
def app(admin_store: AdminStore):
    """Falcon ASGI app serving the admin store."""
    return create_app(admin_store)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
