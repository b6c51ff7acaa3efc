"""Validator adapters.

Usage:
    from routeforge.infrastructure.validation import as_validator
"""

from routeforge.infrastructure.validation.pydantic_validator import (
    PydanticValidator,
    as_validator,
    format_validation_errors,
)

__all__ = ["PydanticValidator", "as_validator", "format_validation_errors"]
