"""Core error package.

Exception taxonomy shared by every layer of routeforge.

Usage:
    from routeforge.core.errors import ConfigurationError, ValidationFailure
"""

from routeforge.core.errors.routing_errors import (
    AuthenticationFailure,
    ConfigurationError,
    FieldIssue,
    InvalidCredentialError,
    MissingCredentialError,
    RouteforgeError,
    ValidationFailure,
)

__all__ = [
    "AuthenticationFailure",
    "ConfigurationError",
    "FieldIssue",
    "InvalidCredentialError",
    "MissingCredentialError",
    "RouteforgeError",
    "ValidationFailure",
]
