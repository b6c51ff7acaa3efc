"""Global exception handlers for the FastAPI application.

Every error leaves the server as a small JSON object with an ``error`` key.
Unhandled exceptions become a generic 500; internal details are logged,
never returned to the client.

Handlers:
    http_exception_handler: Starlette/FastAPI HTTPException (404, 405, ...)
    generic_exception_handler: Catch-all for unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with an app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routeforge.core.container import get_logger

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to ``{"error": detail}``.

    Headers carried by the exception (e.g. WWW-Authenticate, Allow) are
    preserved.

    Args:
        request: Incoming request.
        exc: HTTPException raised by routing or a handler.

    Returns:
        JSONResponse with the exception's status code.
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions raised anywhere in a route chain.

    Args:
        request: Incoming request.
        exc: Unhandled exception.

    Returns:
        JSONResponse 500 ``{"error": "Internal Server Error"}``.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        method=request.method,
        path=request.url.path,
        trace_id=getattr(request.state, "trace_id", None),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with ``app``.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
