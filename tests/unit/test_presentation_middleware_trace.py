"""Unit tests for TraceMiddleware.

Tests cover:
- X-Trace-Id header (generated or reused)
- request_completed access line for answered and failing requests
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from routeforge.presentation.middleware import TraceMiddleware, get_trace_id


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def app(logger):
    app = FastAPI()
    app.add_middleware(TraceMiddleware, logger=logger)

    @app.get("/ok")
    async def ok():
        return {"trace_id": get_trace_id()}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


def completed_lines(logger: MagicMock) -> list[dict]:
    return [
        call.kwargs
        for call in logger.info.call_args_list
        if call.args == ("request_completed",)
    ]


@pytest.mark.unit
class TestTraceMiddleware:
    """Test trace ids and access logging."""

    def test_incoming_trace_id_reused(self, app):
        """Test a client supplied X-Trace-Id is echoed and visible to handlers."""
        with TestClient(app) as client:
            response = client.get("/ok", headers={"X-Trace-Id": "abc-123"})

        assert response.headers["x-trace-id"] == "abc-123"
        assert response.json() == {"trace_id": "abc-123"}

    def test_access_line_logged(self, app, logger):
        """Test an answered request logs method, path and status."""
        with TestClient(app) as client:
            client.get("/ok")

        [line] = completed_lines(logger)
        assert line["method"] == "GET"
        assert line["path"] == "/ok"
        assert line["status_code"] == 200
        assert line["duration_ms"] >= 0

    def test_failing_request_logged_as_500(self, app, logger):
        """Test an exception escaping the app is still access-logged."""
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/boom")

        assert response.status_code == 500
        [line] = completed_lines(logger)
        assert line["path"] == "/boom"
        assert line["status_code"] == 500
