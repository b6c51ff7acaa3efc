"""Schema validator protocol.

Route definitions carry opaque schema handles. Anything that implements
this protocol can be used directly; other handles are wrapped by the
pydantic adapter (see routeforge.infrastructure.validation).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SchemaValidator(Protocol):
    """Validate a value against a schema.

    Implementations:
        - PydanticValidator: any pydantic model or type

    Contract:
        - Synchronous.
        - Returns the (possibly coerced) value on success.
        - Raises ValidationFailure carrying FieldIssue entries on failure.
        - Any other exception is a bug, not an input problem.
    """

    def validate(self, value: Any) -> Any:
        """Validate ``value``.

        Args:
            value: Raw input (path params, query bag or parsed JSON body).

        Returns:
            The validated value.

        Raises:
            ValidationFailure: If the value does not satisfy the schema.
        """
        ...
