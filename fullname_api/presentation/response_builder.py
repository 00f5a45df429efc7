"""Response builder for API Gateway proxy responses.

Converts a validation outcome (Result[FullName, DomainError]) into the
status code, headers and JSON body returned by the Lambda function.

Exports:
    ProxyResponse: API Gateway proxy integration response
    ResponseBuilder: Utility class mapping outcomes to responses
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi import status

from fullname_api.core.constants import (
    JSON_CONTENT_TYPE,
    MESSAGE_EMPTY_BODY,
    MESSAGE_INTERNAL_ERROR,
    MESSAGE_MALFORMED_BODY,
    MESSAGE_METHOD_NOT_ALLOWED,
    MESSAGE_MISSING_FIELDS,
    MESSAGE_SUCCESS,
)
from fullname_api.core.enums import ErrorCode
from fullname_api.core.errors import DomainError
from fullname_api.core.result import Failure, Result, Success
from fullname_api.domain.value_objects import FullName
from fullname_api.schemas.name_schemas import ErrorResponse, SuccessResponse


def _json_headers() -> dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE}


@dataclass(frozen=True, slots=True)
class ProxyResponse:
    """API Gateway proxy integration response.

    Attributes:
        status_code: HTTP status code.
        body: JSON response body.
        headers: Response headers.
    """

    status_code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=_json_headers)

    def to_dict(self) -> dict[str, Any]:
        """Render the shape API Gateway expects from a proxy integration.

        Returns:
            Dict with statusCode, headers and body keys.
        """
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


class ResponseBuilder:
    """Build proxy responses from validation outcomes.

    Every response carries ``Content-Type: application/json`` and a compact
    JSON object body: ``{"error": ...}`` for failures and
    ``{"message": ..., "fullName": ...}`` for success.

    Example:
        >>> response = ResponseBuilder.from_result(
        ...     Success(value=FullName("John", "Doe"))
        ... )
        >>> response.body
        '{"message":"Request processed successfully","fullName":"John Doe"}'
    """

    @staticmethod
    def from_result(result: Result[FullName, DomainError]) -> ProxyResponse:
        """Convert a validation outcome to a proxy response.

        Args:
            result: Success with the full name, or Failure with an error.

        Returns:
            ProxyResponse for the outcome.
        """
        match result:
            case Success(value=full_name):
                return ResponseBuilder.success(full_name)
            case Failure(error=error):
                return ResponseBuilder.from_error(error)

    @staticmethod
    def success(full_name: FullName) -> ProxyResponse:
        """Build the 200 acknowledgment.

        Args:
            full_name: Validated full name.

        Returns:
            ProxyResponse with status 200.
        """
        body = SuccessResponse(message=MESSAGE_SUCCESS, full_name=str(full_name))
        return ProxyResponse(
            status_code=status.HTTP_200_OK,
            body=body.model_dump_json(by_alias=True),
        )

    @staticmethod
    def from_error(error: DomainError) -> ProxyResponse:
        """Build an error response for a failed outcome.

        Unknown codes map to the generic 500 response so internal details
        never reach the client.

        Args:
            error: Error carried by the failed outcome.

        Returns:
            ProxyResponse with a 4xx or 500 status.
        """
        status_code = ResponseBuilder._get_status_code(error.code)
        message = ResponseBuilder._get_message(error.code)
        return ProxyResponse(
            status_code=status_code,
            body=ErrorResponse(error=message).model_dump_json(),
        )

    @staticmethod
    def _get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Args:
            code: Error code.

        Returns:
            HTTP status code (400-599).

        Example:
            >>> ResponseBuilder._get_status_code(ErrorCode.METHOD_NOT_ALLOWED)
            405
        """
        mapping = {
            ErrorCode.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
            ErrorCode.EMPTY_BODY: status.HTTP_400_BAD_REQUEST,
            ErrorCode.MALFORMED_BODY: status.HTTP_400_BAD_REQUEST,
            ErrorCode.MISSING_FIELDS: status.HTTP_400_BAD_REQUEST,
            ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_message(code: ErrorCode) -> str:
        """Get the client-facing message for an error code.

        Args:
            code: Error code.

        Returns:
            Message placed in the ``error`` field of the body.
        """
        mapping = {
            ErrorCode.METHOD_NOT_ALLOWED: MESSAGE_METHOD_NOT_ALLOWED,
            ErrorCode.EMPTY_BODY: MESSAGE_EMPTY_BODY,
            ErrorCode.MALFORMED_BODY: MESSAGE_MALFORMED_BODY,
            ErrorCode.MISSING_FIELDS: MESSAGE_MISSING_FIELDS,
        }
        return mapping.get(code, MESSAGE_INTERNAL_ERROR)
