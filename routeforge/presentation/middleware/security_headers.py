"""Security headers middleware.

Adds a conservative set of security headers to every response (API
responses included): clickjacking, MIME sniffing and referrer leakage
protection. Headers already set by a handler are left alone.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


@dataclass(frozen=True, slots=True)
class SecurityHeadersConfig:
    """Header values applied to responses. ``None`` disables a header."""

    x_frame_options: str | None = "DENY"
    x_content_type_options: str | None = "nosniff"
    referrer_policy: str | None = "no-referrer"
    cross_origin_resource_policy: str | None = "same-origin"
    strict_transport_security: str | None = None

    def headers(self) -> dict[str, str]:
        pairs = {
            "X-Frame-Options": self.x_frame_options,
            "X-Content-Type-Options": self.x_content_type_options,
            "Referrer-Policy": self.referrer_policy,
            "Cross-Origin-Resource-Policy": self.cross_origin_resource_policy,
            "Strict-Transport-Security": self.strict_transport_security,
        }
        return {name: value for name, value in pairs.items() if value}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that adds security headers to each response."""

    def __init__(self, app: ASGIApp, config: SecurityHeadersConfig | None = None):
        super().__init__(app)
        self._headers = (config or SecurityHeadersConfig()).headers()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
