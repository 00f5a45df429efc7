"""Dependency container (composition root).

Centralizes construction of application-scoped collaborators so the handler,
the client and the verifier never pick adapters themselves.

Usage:
    from fullname_api.core.container import get_logger

    logger = get_logger()
"""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from fullname_api.core.config import Settings, settings

if TYPE_CHECKING:
    from fullname_api.domain.protocols.logger_protocol import LoggerProtocol


def build_logger(config: Settings) -> "LoggerProtocol":
    """Configure structured logging for ``config`` and return its logger.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Configuration is process-wide: module loggers obtained with
    ``structlog.get_logger`` (client, verifier) follow the same renderer
    and minimum level.

    Args:
        config: Settings providing the environment and log level.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from fullname_api.infrastructure.logging.console_adapter import ConsoleAdapter

    level = logging.getLevelNamesMapping()[config.log_level]
    return ConsoleAdapter(use_json=not config.is_development, level=level)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Returns:
        LoggerProtocol: Logger built from the global settings.
    """
    return build_logger(settings)
