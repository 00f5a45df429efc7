"""FullName value object.

Immutable pair of validated name parts.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FullName:
    """Validated first and last name.

    Both parts are guaranteed non-blank by the request validator. They are
    stored exactly as received; no trimming or case folding happens here.

    Attributes:
        first_name: First name as sent by the client.
        last_name: Last name as sent by the client.

    Example:
        >>> str(FullName("John", "Doe"))
        'John Doe'
    """

    first_name: str
    last_name: str

    def __str__(self) -> str:
        """Return the names joined by a single space."""
        return f"{self.first_name} {self.last_name}"
