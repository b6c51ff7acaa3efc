"""Result types for railway-oriented programming.

Operations that can fail as part of their normal contract (verifying a
bearer token is the main one) return a Result instead of raising, so the
caller decides how the failure is surfaced.

Usage:
    result = token_service.verify(token)
    match result:
        case Success(value=claims):
            request.state.user = claims
        case Failure(error=reason):
            raise InvalidCredentialError()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
