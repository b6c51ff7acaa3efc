"""LoggerProtocol definition for structured logging.

Every log call in routeforge is structured: a short event message plus
key-value context. Implementations decide how it is rendered.

Security:
    - NEVER log bearer tokens or signing secrets
    - Log claim subjects, not full claim sets

Usage:
    from routeforge.core.container import get_logger

    logger = get_logger()
    logger.info("route_registered", method="GET", path="/api/v1/places")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_completed", status_code=200)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the five standard levels and context binding for
    request-scoped logging.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event message.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
