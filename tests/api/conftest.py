"""Fixtures for end-to-end API tests against the example application."""

import pytest
from fastapi.testclient import TestClient

from example_app.controllers.place_controller import service
from example_app.main import build_app
from routeforge import sign_token


@pytest.fixture(autouse=True)
def clear_places():
    """Start every test with an empty place store."""
    service.clear()
    yield
    service.clear()


@pytest.fixture
def client():
    """TestClient over a fresh example app (routes mounted on startup)."""
    with TestClient(build_app(), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def bearer():
    """Authorization header signed by the application token service."""
    return {"Authorization": f"Bearer {sign_token({'sub': 'u1'})}"}
