"""Error boundary for the HTTP surface.

Exports:
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from routeforge.presentation.errors.exception_handlers import (
    INTERNAL_ERROR_MESSAGE,
    register_exception_handlers,
)

__all__ = ["INTERNAL_ERROR_MESSAGE", "register_exception_handlers"]
