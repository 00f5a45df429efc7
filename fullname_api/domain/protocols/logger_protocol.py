"""Structured logging port.

The handler, the API client and the contract verifier log through this
protocol. Messages are snake_case event names; values travel as keyword
context so JSON output stays queryable in CloudWatch.

Levels used:
    debug    request receipt, per-interaction progress, readiness probes
    info     successful request processing, verification summary
    warning  transport failures, contract mismatches
    error    malformed bodies, unexpected failures

Only the derived full name is logged on the success path. Bodies are
truncated before they are added to context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger accepted by the handler."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level.

        Args:
            message: Event name.
            error: Exception whose type and text are added to the context.
            **context: Structured fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger carrying ``context`` on every entry.

        The receiver is left unchanged; the Lambda handler binds the
        request id once per invocation.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
