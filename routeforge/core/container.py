"""Container module - centralized dependency construction.

Factories here are the composition root: they read settings once and
return process-wide singletons (lru_cache). Adapters are imported lazily
so importing the container never pulls in optional infrastructure.

Usage:
    from routeforge.core.container import get_logger, get_token_service

    logger = get_logger()
    token = get_token_service().sign({"sub": "u1"})

Testing:
    Call ``<factory>.cache_clear()`` after patching settings.
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from routeforge.core.config import get_settings

if TYPE_CHECKING:
    from routeforge.domain.protocols import LoggerProtocol, TokenServiceProtocol
    from routeforge.presentation.middleware.auth_middleware import (
        BearerAuthenticator,
    )


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from routeforge.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache
def get_token_service() -> "TokenServiceProtocol":
    """Return the token service singleton (PyJWT, settings secret).

    Logs a warning when the development fallback secret is in use.

    Returns:
        TokenServiceProtocol: JWT service.
    """
    from routeforge.infrastructure.security.jwt_service import JWTService

    settings = get_settings()
    if settings.uses_insecure_secret:
        get_logger().warning(
            "insecure_jwt_secret",
            detail="JWT_SECRET is not set; using the development fallback secret",
            environment=settings.environment.value,
        )

    return JWTService(
        secret_key=settings.jwt_secret,
        expiration=timedelta(minutes=settings.jwt_expiration_minutes),
        algorithm=settings.jwt_algorithm,
    )


@lru_cache
def get_authenticator() -> "BearerAuthenticator":
    """Return the default bearer authenticator singleton.

    Returns:
        BearerAuthenticator: Authenticator bound to the token service.
    """
    from routeforge.presentation.middleware.auth_middleware import (
        BearerAuthenticator,
    )

    return BearerAuthenticator(get_token_service(), logger=get_logger())
