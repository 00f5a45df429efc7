"""Core errors package.

Usage:
    from fullname_api.core.errors import DomainError, ValidationError
"""

from fullname_api.core.errors.common_errors import InternalError, ValidationError
from fullname_api.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "InternalError",
    "ValidationError",
]
