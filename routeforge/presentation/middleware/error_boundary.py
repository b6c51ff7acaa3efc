"""Error boundary middleware.

Innermost application middleware: turns an exception escaping a route
chain into the generic 500 response, so the outer middleware (trace and
access log, security headers, CORS) still receives a response to
decorate and log.

Exceptions raised by the outer middleware themselves are still caught by
the ``Exception`` handler registered on the application.
"""

from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from routeforge.presentation.errors.exception_handlers import (
    generic_exception_handler,
)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that converts unhandled exceptions to 500."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await generic_exception_handler(request, exc)
