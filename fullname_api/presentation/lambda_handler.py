"""Lambda function entrypoint for API Gateway proxy integration.

Composes request validation and response shaping. Each invocation starts
fresh; nothing is shared between calls except the application logger.

Flow:
    event -> (method, path, body) -> validate_request -> ResponseBuilder

Every branch ends in a ProxyResponse. Unexpected exceptions are caught at
this boundary and turned into the generic 500 response; the function never
terminates abnormally.

Usage (AWS handler setting):
    fullname_api.presentation.lambda_handler.lambda_handler
"""

import base64
import binascii
from collections.abc import Mapping
from typing import Any

from fullname_api.core.constants import MARKET_ID_HEADER, MESSAGE_MALFORMED_BODY
from fullname_api.core.container import get_logger
from fullname_api.core.enums import ErrorCode
from fullname_api.core.errors import InternalError, ValidationError
from fullname_api.core.result import Failure, Result, Success
from fullname_api.core.validation import validate_request
from fullname_api.domain.protocols.logger_protocol import LoggerProtocol
from fullname_api.domain.value_objects import FullName
from fullname_api.presentation.response_builder import ProxyResponse, ResponseBuilder


def handle_request(
    method: str | None,
    body: str | None,
    *,
    path: str = "/",
    headers: Mapping[str, str] | None = None,
    logger: LoggerProtocol | None = None,
) -> ProxyResponse:
    """Handle one request and return its response.

    Args:
        method: HTTP method of the request.
        body: Raw request body, if any.
        path: Request path (logged only).
        headers: Request headers (X-Market-Id is logged, nothing else is read).
        logger: Logger to use; defaults to the application logger.

    Returns:
        ProxyResponse for one of the six outcomes.
    """
    log = logger or get_logger()
    try:
        log.debug(
            "request_received",
            method=method,
            path=path,
            market_id=_header(headers, MARKET_ID_HEADER),
        )
        result = validate_request(method, body)
        return _respond(result, log, body)
    except Exception as e:
        log.error("request_processing_failed", error=e, method=method, path=path)
        return _internal_error(e)


def _respond(
    result: Result[FullName, ValidationError],
    log: LoggerProtocol,
    body: str | None,
) -> ProxyResponse:
    match result:
        case Success(value=full_name):
            log.info("request_processed", full_name=str(full_name))
        case Failure(error=error) if error.code == ErrorCode.MALFORMED_BODY:
            log.error(
                "request_body_invalid_json",
                reason=(error.details or {}).get("reason"),
                body_length=len(body or ""),
            )
        case Failure(error=error):
            log.debug("request_rejected", code=error.code.value)
    return ResponseBuilder.from_result(result)


def _internal_error(error: Exception) -> ProxyResponse:
    """Build the generic 500 for an exception caught at the boundary."""
    failure = InternalError(
        code=ErrorCode.INTERNAL_ERROR,
        message=f"{type(error).__name__}: {error}",
    )
    return ResponseBuilder.from_result(Failure(error=failure))


def _header(headers: Mapping[str, str] | None, name: str) -> str | None:
    """Case-insensitive header lookup."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def _event_method(event: Mapping[str, Any]) -> str | None:
    """Read the method from a REST API (v1) or HTTP API (v2) event."""
    method = event.get("httpMethod")
    if method:
        return str(method)
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method")


def _event_body(event: Mapping[str, Any]) -> Result[str | None, ValidationError]:
    """Read the body, decoding it when API Gateway base64-encoded it."""
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return Success(value=body)
    try:
        return Success(value=base64.b64decode(body, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError) as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.MALFORMED_BODY,
                message=MESSAGE_MALFORMED_BODY,
                details={"reason": str(e)},
            )
        )


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """AWS Lambda handler for API Gateway proxy integration.

    Args:
        event: API Gateway proxy request event (payload v1 or v2).
        context: Lambda context; ``aws_request_id`` is bound into logs.

    Returns:
        Proxy response dict with statusCode, headers and body.
    """
    log = get_logger().bind(request_id=getattr(context, "aws_request_id", None))
    try:
        method = _event_method(event)
        path = event.get("path") or event.get("rawPath") or "/"
        headers = event.get("headers") or {}

        match _event_body(event):
            case Success(value=body):
                response = handle_request(
                    method, body, path=path, headers=headers, logger=log
                )
            case Failure(error=error) if (method or "").upper() == "POST":
                log.error(
                    "request_body_undecodable",
                    reason=(error.details or {}).get("reason"),
                )
                response = ResponseBuilder.from_error(error)
            case Failure():
                # Method check wins over body decoding
                response = handle_request(
                    method, None, path=path, headers=headers, logger=log
                )
    except Exception as e:
        log.error("event_processing_failed", error=e)
        response = _internal_error(e)

    return response.to_dict()
