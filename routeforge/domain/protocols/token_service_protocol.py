"""Token service protocol.

Issues and verifies the bearer credentials the authenticator checks.
Infrastructure provides the concrete adapter (JWTService).

Token Strategy:
    - Signed, time-boxed tokens (default lifetime: one hour)
    - Arbitrary claim payload chosen by the issuer
    - Stateless verification against a shared secret
"""

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Protocol

from routeforge.core.result import Result


class TokenServiceProtocol(Protocol):
    """Bearer token issuing and verification interface.

    Implementations:
        - JWTService: HMAC-SHA256 (production)

    Usage:
        token = token_service.sign({"sub": "u1"})

        match token_service.verify(token):
            case Success(value=claims):
                claims["sub"]  # "u1"
            case Failure(error=reason):
                ...
    """

    def sign(
        self, claims: Mapping[str, Any], expires_in: timedelta | None = None
    ) -> str:
        """Issue a signed token carrying ``claims``.

        Args:
            claims: Arbitrary JSON-serializable claim payload.
            expires_in: Lifetime override; the service default when None.

        Returns:
            Encoded token string.
        """
        ...

    def verify(self, token: str) -> Result[dict[str, Any], str]:
        """Verify a token and return its claims.

        Args:
            token: Encoded token string.

        Returns:
            Success with the decoded claims, or Failure with a reason constant
            from AuthenticationError.
        """
        ...
