"""Pytest configuration shared by all suites.

Environment variables are set before any routeforge import so the
module-level settings singleton is built in testing mode with a real
signing secret.
"""

import os

TEST_JWT_SECRET = "routeforge-test-secret-key-0123456789abcdef"

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import Callable, Mapping  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from starlette.requests import Request  # noqa: E402

from routeforge.infrastructure.security.jwt_service import JWTService  # noqa: E402

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no network or server")
    config.addinivalue_line(
        "markers", "integration: Integration tests against real libraries"
    )
    config.addinivalue_line("markers", "api: End-to-end HTTP tests through the app")


def build_request(
    method: str = "GET",
    path: str = "/",
    *,
    headers: Mapping[str, str] | None = None,
    query_string: str = "",
    body: bytes = b"",
    path_params: Mapping[str, Any] | None = None,
) -> Request:
    """Build a Starlette Request without a server.

    Args:
        method: HTTP method.
        path: Request path.
        headers: Request headers.
        query_string: Raw query string (``"page=2&limit=5"``).
        body: Raw request body.
        path_params: Matched path parameters.

    Returns:
        Request whose body stream yields ``body`` once.
    """
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "query_string": query_string.encode(),
        "headers": [
            (name.lower().encode(), value.encode())
            for name, value in (headers or {}).items()
        ],
        "path_params": dict(path_params or {}),
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
    }

    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory fixture for server-less requests."""
    return build_request


@pytest.fixture
def token_service() -> JWTService:
    """Token service signing with the suite's secret."""
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def auth_headers(token_service: JWTService) -> dict[str, str]:
    """Authorization header carrying a valid token for subject ``u1``."""
    token = token_service.sign({"sub": "u1"})
    return {"Authorization": f"Bearer {token}"}
