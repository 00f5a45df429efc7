"""Core enums package.

Usage:
    from fullname_api.core.enums import ErrorCode, Environment
"""

from fullname_api.core.enums.environment import Environment
from fullname_api.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
