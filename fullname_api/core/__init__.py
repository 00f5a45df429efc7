"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes carried inside results
- Request validation for the name endpoint

The core module has NO dependencies on the presentation or infrastructure layers.
"""

from fullname_api.core.enums import ErrorCode
from fullname_api.core.errors import DomainError, InternalError, ValidationError
from fullname_api.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "InternalError",
    "Result",
    "Success",
    "ValidationError",
]
