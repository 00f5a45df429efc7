"""Result types for railway-oriented programming.

Validation, HTTP dispatch and contract checks all return a Result instead of
raising, so every failure branch is visible at the call site.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="Port must be numeric")
        return Success(value=int(raw))

    match parse_port("8000"):
        case Success(value=port):
            print(f"Listening on {port}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
