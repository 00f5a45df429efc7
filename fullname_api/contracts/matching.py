"""Structural JSON matching.

Compares an expected JSON value with an actual one by shape: every key of an
expected object must exist in the actual object with the same JSON kind,
recursively. Literal values are not compared and extra actual keys are
allowed.
"""

from dataclasses import dataclass
from typing import Any

from fullname_api.core.enums import ErrorCode


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value.

    Args:
        value: Value produced by ``json.loads``.

    Returns:
        One of "null", "boolean", "number", "string", "array", "object".

    Example:
        >>> json_kind(True), json_kind(1.5), json_kind({})
        ('boolean', 'number', 'object')
    """
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class ShapeMismatch:
    """First difference found between expected and actual JSON.

    Attributes:
        code: CONTRACT_FIELD_MISSING or CONTRACT_TYPE_MISMATCH.
        location: JSON path of the mismatch (``$`` is the root).
        expected_kind: Kind required by the expectation.
        actual_kind: Kind found, or None when the key is missing.
    """

    code: ErrorCode
    location: str
    expected_kind: str
    actual_kind: str | None = None

    def describe(self) -> str:
        """Human-readable description of the mismatch."""
        if self.actual_kind is None:
            return f"property '{self.location}' missing (expected {self.expected_kind})"
        return (
            f"property '{self.location}' has type {self.actual_kind}, "
            f"expected {self.expected_kind}"
        )


def match_shape(expected: Any, actual: Any, *, path: str = "$") -> ShapeMismatch | None:
    """Check that ``actual`` has the shape of ``expected``.

    Args:
        expected: Expected JSON value.
        actual: Actual JSON value.
        path: JSON path of the values being compared.

    Returns:
        None when the shapes match, otherwise the first mismatch found.
    """
    expected_kind = json_kind(expected)
    actual_kind = json_kind(actual)
    if expected_kind != actual_kind:
        return ShapeMismatch(
            code=ErrorCode.CONTRACT_TYPE_MISMATCH,
            location=path,
            expected_kind=expected_kind,
            actual_kind=actual_kind,
        )

    if expected_kind != "object":
        return None

    for key, expected_value in expected.items():
        child = f"{path}.{key}"
        if key not in actual:
            return ShapeMismatch(
                code=ErrorCode.CONTRACT_FIELD_MISSING,
                location=child,
                expected_kind=json_kind(expected_value),
            )
        mismatch = match_shape(expected_value, actual[key], path=child)
        if mismatch is not None:
            return mismatch
    return None
