"""Example application entry point.

Run from the repository root:

    python -m example_app.main
"""

from pathlib import Path

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import Response

from routeforge import RegistrationOptions, create_app, run
from routeforge.core.config import settings
from routeforge.core.container import get_logger
from routeforge.presentation.types import CallNext

ROUTES_DIR = Path(__file__).parent / "routes"


async def log_incoming(request: Request, call_next: CallNext) -> Response:
    """Global step: log every matched request before it is validated."""
    get_logger().info(
        "incoming_request", method=request.method, path=request.url.path
    )
    return await call_next(request)


def build_app(*, handler_timeout: float | None = None) -> FastAPI:
    """Build the example application (routes mount on startup)."""
    return create_app(
        registration=RegistrationOptions(
            prefix=settings.api_prefix,
            routes_dir=ROUTES_DIR,
            global_middleware=[log_incoming],
            handler_timeout=handler_timeout,
        )
    )


app = build_app()


if __name__ == "__main__":
    run(app)
