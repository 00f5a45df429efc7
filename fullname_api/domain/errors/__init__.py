"""Domain errors package.

Usage:
    from fullname_api.domain.errors import ContractViolation, ReadinessError
"""

from fullname_api.domain.errors.contract_error import ContractViolation
from fullname_api.domain.errors.readiness_error import ReadinessError

__all__ = [
    "ContractViolation",
    "ReadinessError",
]
