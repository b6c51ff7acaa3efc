"""Security adapters.

Usage:
    from routeforge.infrastructure.security import JWTService
"""

from routeforge.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
