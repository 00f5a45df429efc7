"""Common error classes produced while handling a request.

Error Types:
- ValidationError: Client input was rejected (405 or 400)
- InternalError: Unexpected failure while handling the request (500)

Usage:
    from fullname_api.core.errors import ValidationError
    from fullname_api.core.enums import ErrorCode
    from fullname_api.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.MISSING_FIELDS,
        message="Both firstname and lastname are required.",
        field="FirstName",
    ))
"""

from dataclasses import dataclass

from fullname_api.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation, if any.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unexpected failure while processing a request.

    The message is kept for logs only; responses use a generic text.
    """

    pass
