"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development/production: human-readable console renderer
- Testing/CI: JSON renderer for machine parsing

Every event passes through ``drop_secret_fields`` first, so a password or
stored hash passed as context by mistake never reaches the renderer.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SECRET_FIELDS = frozenset({"password", "password_hash", "hashed", "hashed_password"})
"""Context keys removed from every event before rendering."""


def drop_secret_fields(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor removing password and hash context keys.

    Args:
        logger: Wrapped logger (unused).
        method_name: Log method name (unused).
        event_dict: Event context.

    Returns:
        dict[str, Any]: Event context without SECRET_FIELDS keys.
    """
    for key in SECRET_FIELDS.intersection(event_dict):
        del event_dict[key]
    return event_dict


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger for the password hashing facade.

    Args:
        use_json (bool): JSON output when True (CI/testing), human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        """Configure structlog and create the underlying logger.

        Args:
            use_json (bool): JSON output when True, console renderer when False.
            level (str): Events below this level are filtered out.
        """
        processors: list[structlog.types.Processor] = [
            drop_secret_fields,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(level.upper())
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message (e.g. ``password_hashed`` with the cost).

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message (e.g. a verification MISMATCH).

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message (e.g. a PRIMITIVE_FAILURE).

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Event name.
            error (Exception | None): Flattened into error_type/error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message (str): Event name.
            error (Exception | None): Flattened into error_type/error_message.
            **context: Structured key-value context.
        """
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context (alias for bind).

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        return self.bind(**context)
