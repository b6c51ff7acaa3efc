"""routeforge: declarative route registration for FastAPI.

Route modules declare endpoints as data (``routes = [define_route(...)]``);
the registrar discovers them, composes each into an ordered chain
(global middleware → validation → auth → handler) and mounts it.

Usage:
    from routeforge import RegistrationOptions, create_app, run

    app = create_app(
        registration=RegistrationOptions(prefix="/api/v1", routes_dir="app/routes")
    )
    run(app)
"""

from routeforge.core.errors import (
    AuthenticationFailure,
    ConfigurationError,
    FieldIssue,
    InvalidCredentialError,
    MissingCredentialError,
    RouteforgeError,
    ValidationFailure,
)
from routeforge.main import create_app, run
from routeforge.presentation.middleware import (
    AuthMiddleware,
    get_current_user,
    sign_token,
)
from routeforge.presentation.routing import (
    HTTPMethod,
    RegistrationOptions,
    RouteDefinition,
    RouteValidation,
    compose_route,
    define_route,
    get_validated,
    load_route_definitions,
    register_route_definitions,
    register_routes,
)

__version__ = "0.1.0"

__all__ = [
    "AuthMiddleware",
    "AuthenticationFailure",
    "ConfigurationError",
    "FieldIssue",
    "HTTPMethod",
    "InvalidCredentialError",
    "MissingCredentialError",
    "RegistrationOptions",
    "RouteDefinition",
    "RouteValidation",
    "RouteforgeError",
    "ValidationFailure",
    "compose_route",
    "create_app",
    "define_route",
    "get_current_user",
    "get_validated",
    "load_route_definitions",
    "register_route_definitions",
    "register_routes",
    "run",
    "sign_token",
]
