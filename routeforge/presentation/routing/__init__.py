"""Route registration engine.

Exports:
    define_route, RouteDefinition, RouteValidation, HTTPMethod
    load_route_definitions, iter_route_definitions
    compose_route, ComposedRoute, get_validated
    register_routes, register_route_definitions, RegistrationOptions
"""

from routeforge.presentation.routing.composer import (
    ComposedRoute,
    compose_route,
    get_validated,
)
from routeforge.presentation.routing.loader import (
    iter_route_definitions,
    load_route_definitions,
)
from routeforge.presentation.routing.metadata import (
    HTTPMethod,
    RouteDefinition,
    RouteValidation,
    define_route,
)
from routeforge.presentation.routing.registrar import (
    RegistrationOptions,
    register_route_definitions,
    register_routes,
)

__all__ = [
    "ComposedRoute",
    "HTTPMethod",
    "RegistrationOptions",
    "RouteDefinition",
    "RouteValidation",
    "compose_route",
    "define_route",
    "get_validated",
    "iter_route_definitions",
    "load_route_definitions",
    "register_route_definitions",
    "register_routes",
]
