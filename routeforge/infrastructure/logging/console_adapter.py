"""Console logging adapter.

Writes structured log events to stdout through structlog. Development
uses the colored console renderer; testing, CI and production emit one
JSON object per line.

Every event picks up the values bound with
``structlog.contextvars.bind_contextvars`` (the request trace_id bound by
TraceMiddleware), so handlers never pass the trace id around themselves.

The adapter satisfies LoggerProtocol structurally; it does not inherit
from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def build_processors(*, use_json: bool) -> list[structlog.types.Processor]:
    """Return the processor chain, renderer last.

    Args:
        use_json (bool): Render JSON instead of the console format.

    Returns:
        list[structlog.types.Processor]: Processors for structlog.configure.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structlog-backed logger used by the container.

    Args:
        use_json (bool): JSON lines when True, colored console when False.
        level (str): Minimum level name; lower events are dropped before
            rendering.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        structlog.configure(
            processors=build_processors(use_json=use_json),
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug event (token rejections, discovery details)."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info event (registration, access lines)."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning event (duplicate routes, insecure secret)."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error event.

        Args:
            message (str): Event name.
            error (Exception | None): Exception whose type and message are
                added as ``error_type`` and ``error_message``.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event; ``error`` is handled as in :meth:`error`."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``.

        The receiving adapter is unchanged.
        """
        return self._wrapping(self._logger.bind(**context))
