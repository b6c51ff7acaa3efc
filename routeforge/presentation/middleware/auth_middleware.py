"""Bearer token authentication.

Two pieces:

- BearerAuthenticator: extracts ``Authorization: Bearer <token>``, verifies
  it with the token service and stores the claim set on
  ``request.state.user``. Raises MissingCredentialError or
  InvalidCredentialError.
- AuthMiddleware: the chain step inserted for ``auth=True`` routes. Converts
  those two exceptions into 401 responses and stops the chain.

Usage:
    # Default step (what the registrar uses when no override is given)
    step = AuthMiddleware(get_authenticator())

    # Inside a handler on an auth route
    async def me(request: Request):
        return {"sub": get_current_user(request)["sub"]}
"""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.requests import Request
from starlette.responses import Response

from routeforge.core.errors import (
    AuthenticationFailure,
    InvalidCredentialError,
    MissingCredentialError,
)
from routeforge.core.result import Failure, Success
from routeforge.domain.protocols import LoggerProtocol, TokenServiceProtocol
from routeforge.presentation.types import CallNext

BEARER_PREFIX = "Bearer "


class BearerAuthenticator:
    """Verify bearer credentials and attach the claim set to the request.

    Attributes:
        token_service: Service used to verify tokens.
    """

    def __init__(
        self,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.token_service = token_service
        self._logger = logger

    @staticmethod
    def extract_token(request: Request) -> str:
        """Return the raw token from the Authorization header.

        Raises:
            MissingCredentialError: Header absent, wrong scheme or empty token.
        """
        header = request.headers.get("Authorization")
        if not header or not header.startswith(BEARER_PREFIX):
            raise MissingCredentialError()

        token = header[len(BEARER_PREFIX) :].strip()
        if not token:
            raise MissingCredentialError()
        return token

    def authenticate(self, request: Request) -> dict[str, Any]:
        """Authenticate the request.

        Args:
            request: Incoming request.

        Returns:
            Decoded claims, also stored on ``request.state.user``.

        Raises:
            MissingCredentialError: No usable bearer credential.
            InvalidCredentialError: Signature, expiry or format check failed.
        """
        token = self.extract_token(request)

        match self.token_service.verify(token):
            case Success(value=claims):
                request.state.user = claims
                return claims
            case Failure(error=reason):
                if self._logger is not None:
                    self._logger.debug("bearer_token_rejected", reason=reason)
                raise InvalidCredentialError() from None

        # Unreachable for protocol-conforming token services
        raise InvalidCredentialError()


class AuthMiddleware:
    """Chain step that requires a valid bearer credential."""

    name = "auth"

    def __init__(self, authenticator: BearerAuthenticator) -> None:
        self.authenticator = authenticator

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            self.authenticator.authenticate(request)
        except AuthenticationFailure as exc:
            return unauthorized_response(exc.message)
        return await call_next(request)


def unauthorized_response(message: str) -> JSONResponse:
    """Build the 401 response for an authentication failure."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(request: Request) -> dict[str, Any] | None:
    """Return the claims attached by the auth step, or None on public routes."""
    return getattr(request.state, "user", None)


def sign_token(
    payload: Mapping[str, Any], expires_in: timedelta | None = None
) -> str:
    """Issue a token with the application token service.

    Args:
        payload: Claims to embed.
        expires_in: Lifetime override (default: settings lifetime, one hour).

    Returns:
        Encoded bearer token.
    """
    from routeforge.core.container import get_token_service

    return get_token_service().sign(payload, expires_in=expires_in)
