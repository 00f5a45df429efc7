"""Domain value objects.

Immutable values produced by request validation.
"""

from fullname_api.domain.value_objects.full_name import FullName

__all__ = ["FullName"]
