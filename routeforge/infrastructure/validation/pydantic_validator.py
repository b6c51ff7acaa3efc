"""Pydantic validation adapter.

Wraps any pydantic-validatable schema handle (a BaseModel subclass, a
dataclass, a TypedDict, a plain annotation such as ``dict[str, int]``) behind
the SchemaValidator protocol.

At construction the handle is compiled once into a ``TypeAdapter``; at call
time the value is validated in lax mode (query and path values arrive as
strings, so "2" validates as int 2) and pydantic errors are normalized into
FieldIssue entries.

Example::

    from pydantic import BaseModel

    class PlaceParams(BaseModel):
        id: str

    validator = as_validator(PlaceParams)
    validator.validate({"id": "abc"})   # PlaceParams(id='abc')
    validator.validate({})              # raises ValidationFailure
"""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from routeforge.core.errors import FieldIssue, ValidationFailure
from routeforge.domain.protocols import SchemaValidator


def format_validation_errors(exc: ValidationError) -> list[FieldIssue]:
    """Normalize a pydantic error into field issues.

    Args:
        exc: Error raised by pydantic.

    Returns:
        One FieldIssue per pydantic line error, ``loc`` joined with dots.
    """
    return [
        FieldIssue(
            field=".".join(str(part) for part in error.get("loc", ())),
            message=error.get("msg", "Invalid value"),
        )
        for error in exc.errors()
    ]


class PydanticValidator:
    """SchemaValidator implementation backed by ``pydantic.TypeAdapter``."""

    def __init__(self, schema: Any) -> None:
        self.schema = schema
        self._adapter: TypeAdapter[Any] = (
            schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
        )

    def validate(self, value: Any) -> Any:
        try:
            return self._adapter.validate_python(value)
        except ValidationError as exc:
            raise ValidationFailure(format_validation_errors(exc)) from exc

    def __repr__(self) -> str:
        name = getattr(self.schema, "__name__", repr(self.schema))
        return f"PydanticValidator({name})"


def as_validator(handle: Any) -> SchemaValidator:
    """Return a SchemaValidator for a schema handle.

    Objects that already implement the protocol are returned unchanged, so
    other schema libraries can be plugged in with a thin adapter. Pydantic
    model classes also expose a ``validate`` attribute (deprecated in v2), so
    classes are always routed through ``PydanticValidator``.

    Args:
        handle: Schema handle from a route definition.

    Returns:
        SchemaValidator for the handle.
    """
    if not isinstance(handle, type) and isinstance(handle, SchemaValidator):
        return handle
    return PydanticValidator(handle)
