"""Domain protocols (ports)."""

from fullname_api.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
