"""Trace middleware: per-request trace_id plus one access log line.

- Adds X-Trace-Id response header (reuses the incoming one when present)
- Binds trace_id into structlog contextvars so every log line emitted while
  handling the request carries it
- Logs ``request_completed`` with method, path, status and duration
- Exposes get_trace_id() for code outside the request handler
"""

from __future__ import annotations

import time
from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from routeforge.domain.protocols import LoggerProtocol

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID.

    Returns:
        str | None: The current request trace ID, or None outside a request.
    """
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that traces and access-logs each request."""

    def __init__(self, app: ASGIApp, logger: LoggerProtocol | None = None) -> None:
        super().__init__(app)
        self._logger = logger

    def _log_completed(
        self, request: Request, status_code: int, started: float
    ) -> None:
        if self._logger is None:
            return
        self._logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set the trace ID, run the request and log its outcome.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with X-Trace-Id header added.
        """
        trace_id = request.headers.get("X-Trace-Id") or str(uuid4())
        request.state.trace_id = trace_id
        trace_id_context.set(trace_id)
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                # Escaped every inner layer; the app's 500 handler answers it
                self._log_completed(request, 500, started)
                raise
            response.headers["X-Trace-Id"] = trace_id
            self._log_completed(request, response.status_code, started)
            return response
        finally:
            # Clear context after request to prevent leakage
            trace_id_context.set(None)
            structlog.contextvars.unbind_contextvars("trace_id")
