"""Domain errors package.

Usage:
    from routeforge.domain.errors import AuthenticationError
"""

from routeforge.domain.errors.authentication_error import AuthenticationError

__all__ = ["AuthenticationError"]
