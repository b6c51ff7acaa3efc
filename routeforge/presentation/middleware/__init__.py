"""HTTP middleware and chain steps.

Usage:
    from routeforge.presentation.middleware import AuthMiddleware, TraceMiddleware
"""

from routeforge.presentation.middleware.auth_middleware import (
    AuthMiddleware,
    BearerAuthenticator,
    get_current_user,
    sign_token,
)
from routeforge.presentation.middleware.error_boundary import ErrorBoundaryMiddleware
from routeforge.presentation.middleware.security_headers import (
    SecurityHeadersConfig,
    SecurityHeadersMiddleware,
)
from routeforge.presentation.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "AuthMiddleware",
    "BearerAuthenticator",
    "ErrorBoundaryMiddleware",
    "SecurityHeadersConfig",
    "SecurityHeadersMiddleware",
    "TraceMiddleware",
    "get_current_user",
    "get_trace_id",
    "sign_token",
]
