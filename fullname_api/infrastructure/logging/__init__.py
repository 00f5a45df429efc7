"""Logging adapters implementing LoggerProtocol."""

from fullname_api.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
