"""Readiness probe error.

Returned when the target endpoint never answered its health check within
the configured number of attempts.
"""

from dataclasses import dataclass

from fullname_api.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ReadinessError(DomainError):
    """Endpoint did not become ready.

    Attributes:
        code: ErrorCode.ENDPOINT_NOT_READY.
        message: Human-readable message.
        url: Health URL that was probed.
        attempts: Number of probes performed.
    """

    url: str
    attempts: int
