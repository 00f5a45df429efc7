"""Contract verification error types.

A ContractViolation describes the first mismatch found while replaying one
recorded interaction against the live provider. It is returned inside a
Failure; the verifier aggregates them into a report.

Usage:
    from fullname_api.domain.errors import ContractViolation
    from fullname_api.core.enums import ErrorCode

    return Failure(error=ContractViolation(
        code=ErrorCode.CONTRACT_STATUS_MISMATCH,
        message="A valid request: expected status 200, got 400",
        interaction="A valid request",
    ))
"""

from dataclasses import dataclass

from fullname_api.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ContractViolation(DomainError):
    """Recorded interaction did not match the provider's response.

    Attributes:
        code: One of the CONTRACT_* error codes.
        message: Human-readable message naming the interaction.
        interaction: Description of the failing interaction.
        location: JSON path or header name where the mismatch was found.
    """

    interaction: str
    location: str | None = None
