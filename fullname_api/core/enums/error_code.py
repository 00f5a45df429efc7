"""Machine-readable error codes.

Error codes follow SUBJECT_REASON naming convention and travel inside
DomainError instances carried by Result types.

Categories:
- Request errors: outcome of validating an incoming request
- Readiness errors: target endpoint never became available
- Contract errors: recorded interaction did not match the live provider
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Request errors
    METHOD_NOT_ALLOWED = "method_not_allowed"
    EMPTY_BODY = "empty_body"
    MALFORMED_BODY = "malformed_body"
    MISSING_FIELDS = "missing_fields"
    INTERNAL_ERROR = "internal_error"

    # Readiness errors
    ENDPOINT_NOT_READY = "endpoint_not_ready"

    # Contract errors
    CONTRACT_STATUS_MISMATCH = "contract_status_mismatch"
    CONTRACT_HEADER_MISSING = "contract_header_missing"
    CONTRACT_BODY_NOT_JSON = "contract_body_not_json"
    CONTRACT_FIELD_MISSING = "contract_field_missing"
    CONTRACT_TYPE_MISMATCH = "contract_type_mismatch"
