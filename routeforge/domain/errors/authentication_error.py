"""Authentication error constants.

Reasons carried in Failure values returned by the token service. These are
NOT exceptions; the authenticator maps every one of them to
InvalidCredentialError so clients only ever see "Unauthorized: Invalid token".

Usage:
    from routeforge.domain.errors import AuthenticationError

    match token_service.verify(token):
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            logger.debug("token_expired")
"""


class AuthenticationError:
    """Token verification failure reasons."""

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
