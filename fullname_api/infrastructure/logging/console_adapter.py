"""Structured stdout logging with structlog.

One adapter serves every environment. Lambda forwards stdout to CloudWatch
Logs, so outside development each entry is a single JSON line; in
development entries are rendered for a terminal.

ConsoleAdapter satisfies LoggerProtocol structurally and does not inherit
from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(use_json: bool) -> list[structlog.types.Processor]:
    """Processor chain shared by every logger the adapter creates."""
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
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
    """Logger writing structured entries to stdout.

    Args:
        use_json: Render JSON lines instead of colored console output.
        level: Minimum stdlib logging level that is emitted.

    Example:
        >>> logger = ConsoleAdapter(use_json=True)
        >>> logger.bind(request_id="abc").info("request_processed", full_name="John Doe")
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        structlog.configure(
            processors=_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level, flattening ``error`` into error_type/error_message."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose entries all carry ``context``."""
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
