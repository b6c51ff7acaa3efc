"""Exception taxonomy for the route registration engine.

Unlike token verification (which returns Result values), the request chain
signals failure by raising. Each exception kind is terminal at exactly one
place:

- ConfigurationError: startup. Aborts registration before traffic.
- ValidationFailure: the validation step. Becomes a 400 response.
- MissingCredentialError / InvalidCredentialError: the auth step. Become 401.

Anything else raised while handling a request is a downstream failure and
is answered by the process-wide boundary with a generic 500.

Usage:
    from routeforge.core.errors import FieldIssue, ValidationFailure

    raise ValidationFailure(
        [FieldIssue(field="address.city", message="Field required")]
    )
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldIssue:
    """One normalized validation problem.

    Attributes:
        field: Dotted path of the offending value ("" for the root value).
        message: Human-readable message.
    """

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON shape used in 400 responses."""
        return {"field": self.field, "message": self.message}


class RouteforgeError(Exception):
    """Base class for all routeforge exceptions."""


class ConfigurationError(RouteforgeError):
    """Fatal startup misconfiguration (e.g. missing routes directory)."""


class ValidationFailure(RouteforgeError):
    """Input did not satisfy a route schema.

    Attributes:
        issues: Normalized per-field issues, in validator order.
    """

    def __init__(
        self, issues: Iterable[FieldIssue], message: str = "Validation failed"
    ):
        self.issues: tuple[FieldIssue, ...] = tuple(issues)
        self.message = message
        super().__init__(message)

    def to_list(self) -> list[dict[str, str]]:
        """Return issues in their JSON shape."""
        return [issue.to_dict() for issue in self.issues]


class AuthenticationFailure(RouteforgeError):
    """Bearer credential rejected.

    Attributes:
        message: Client-facing message placed in the 401 body.
    """

    message = "Unauthorized"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredentialError(AuthenticationFailure):
    """No Authorization header, or not a Bearer credential."""

    message = "Unauthorized: Missing token"


class InvalidCredentialError(AuthenticationFailure):
    """Bearer credential failed verification (bad signature, expired, malformed)."""

    message = "Unauthorized: Invalid token"
