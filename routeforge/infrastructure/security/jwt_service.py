"""JWT token service (adapter).

This service implements the TokenServiceProtocol using PyJWT.

Architecture:
    - Implements TokenServiceProtocol (no inheritance required)
    - Structural typing via Protocol
    - Built once by the container from settings

Security:
    - HMAC-SHA256 (HS256) by default
    - Time-boxed tokens (one hour unless configured otherwise)
    - Unique JWT ID (jti) per token
"""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from routeforge.core.result import Failure, Result, Success
from routeforge.domain.errors import AuthenticationError

DEFAULT_EXPIRATION = timedelta(hours=1)


class JWTService:
    """JWT issuing and verification service.

    Usage:
        from routeforge.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.sign({"sub": "u1"})
        result = token_service.verify(token)
    """

    def __init__(
        self,
        secret_key: str,
        expiration: timedelta = DEFAULT_EXPIRATION,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Shared secret for signing and verification.
            expiration: Default token lifetime (one hour).
            algorithm: HMAC algorithm name.

        Raises:
            ValueError: If secret_key is empty or the lifetime is not positive.
        """
        if not secret_key:
            msg = "JWT secret key must not be empty"
            raise ValueError(msg)
        if expiration <= timedelta(0):
            msg = "JWT expiration must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration = expiration
        self._algorithm = algorithm

    def sign(
        self, claims: Mapping[str, Any], expires_in: timedelta | None = None
    ) -> str:
        """Issue a signed token.

        Args:
            claims: Arbitrary claim payload. Registered claims it already
                carries (iat, jti) are kept; exp is always recomputed.
            expires_in: Lifetime override.

        Returns:
            JWT string (header.payload.signature).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.sign({"sub": "u1"})
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        lifetime = expires_in if expires_in is not None else self._expiration

        payload: dict[str, Any] = {
            "iat": int(now.timestamp()),
            "jti": str(uuid7()),
            **claims,
        }
        payload["exp"] = int((now + lifetime).timestamp())

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def verify(self, token: str) -> Result[dict[str, Any], str]:
        """Verify a token and extract its claims.

        Args:
            token: JWT string.

        Returns:
            Success with the claim set, or Failure with EXPIRED_TOKEN /
            INVALID_TOKEN.

        Note:
            PyJWT checks the signature and the exp claim; any failure
            (tampering, wrong secret, garbage input) is a Failure, never an
            exception.
        """
        try:
            claims: dict[str, Any] = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm]
            )
            return Success(value=claims)

        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)

        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
