"""Centralized constants for internal implementation details.

This module contains fixed values that are part of the endpoint's public
contract or are internal defaults, NOT environment-specific configuration.
For environment-specific settings, use `fullname_api/core/config.py`.

Categories:
- Headers: Content types and header names
- Messages: Exact response texts (clients match on these)
- Timeouts: Default client timeout
- Limits: Truncation limits for logs

Example:
    >>> from fullname_api.core.constants import JSON_CONTENT_TYPE
    >>> headers = {"Content-Type": JSON_CONTENT_TYPE}
"""

# =============================================================================
# Headers
# =============================================================================

JSON_CONTENT_TYPE: str = "application/json"
"""Content-Type set on every handler response."""

JSON_REQUEST_CONTENT_TYPE: str = "application/json; charset=utf-8"
"""Content-Type sent by the client with every request body."""

MARKET_ID_HEADER: str = "X-Market-Id"
"""Optional routing header; read and logged, never validated."""


# =============================================================================
# Response Messages
# =============================================================================

MESSAGE_METHOD_NOT_ALLOWED: str = "Method not allowed. Only POST requests are supported."
MESSAGE_EMPTY_BODY: str = "Request body is required."
MESSAGE_MALFORMED_BODY: str = "Invalid JSON format in request body."
MESSAGE_MISSING_FIELDS: str = "Both firstname and lastname are required."
MESSAGE_INTERNAL_ERROR: str = "Internal server error."
MESSAGE_SUCCESS: str = "Request processed successfully"


# =============================================================================
# Timeouts
# =============================================================================

CLIENT_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for client calls to the endpoint in seconds."""


# =============================================================================
# Limits
# =============================================================================

LOG_BODY_MAX_LENGTH: int = 500
"""Maximum characters of a response body included in client log context."""
