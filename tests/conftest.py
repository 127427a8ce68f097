# This project was developed with assistance from AI tools.
"""Shared fixtures.

The real app from ``content_sources.main`` is a module singleton.
``_clean_overrides`` ensures dependency_overrides are cleared after every
test so a store double from one test never leaks into the next.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from content_sources.main import app as real_app
from content_sources.routes.repositories import get_repository_store

from .factories import encoded_identity


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    """Return the real FastAPI app with all routers mounted."""
    return real_app


@pytest.fixture
def mock_store(app):
    """AsyncMock standing in for the repository store on every request."""
    store = AsyncMock()
    app.dependency_overrides[get_repository_store] = lambda: store
    return store


@pytest.fixture
def client(app, mock_store):
    """TestClient sending a valid identity header for the mock org."""
    return TestClient(app, headers={"x-rh-identity": encoded_identity()})


@pytest.fixture
def anonymous_client(app, mock_store):
    """TestClient that sends no identity header."""
    return TestClient(app)
