"""Request validation for the name endpoint.

A single pure function turns a raw request (method, body) into a Result:
Success carrying the FullName, or Failure carrying a ValidationError whose
code identifies which branch rejected the request. Nothing is logged here;
the handler decides what to log.

Usage:
    from fullname_api.core.validation import validate_request
    from fullname_api.core.result import Success, Failure

    match validate_request("POST", '{"FirstName":"John","LastName":"Doe"}'):
        case Success(value=full_name):
            print(full_name)  # John Doe
        case Failure(error=error):
            print(error.code)
"""

import json

from pydantic import ValidationError as PydanticValidationError

from fullname_api.core.constants import (
    MESSAGE_EMPTY_BODY,
    MESSAGE_MALFORMED_BODY,
    MESSAGE_METHOD_NOT_ALLOWED,
    MESSAGE_MISSING_FIELDS,
)
from fullname_api.core.enums import ErrorCode
from fullname_api.core.errors import ValidationError
from fullname_api.core.result import Failure, Result, Success
from fullname_api.domain.value_objects import FullName
from fullname_api.schemas.name_schemas import NameRequest


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_name_request(body: str) -> Result[NameRequest, ValidationError]:
    """Parse a JSON body into a NameRequest.

    A literal ``null`` document parses to a request with no fields, which the
    caller reports as missing fields. Any other non-object document, or a name
    field holding a non-string value, is malformed.

    Args:
        body: Raw request body (non-empty).

    Returns:
        Success with NameRequest, Failure with MALFORMED_BODY otherwise.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        return Failure(
            error=ValidationError(
                code=ErrorCode.MALFORMED_BODY,
                message=MESSAGE_MALFORMED_BODY,
                details={"reason": str(e)},
            )
        )

    if data is None:
        return Success(value=NameRequest())

    if not isinstance(data, dict):
        return Failure(
            error=ValidationError(
                code=ErrorCode.MALFORMED_BODY,
                message=MESSAGE_MALFORMED_BODY,
                details={"reason": f"expected JSON object, got {type(data).__name__}"},
            )
        )

    try:
        return Success(value=NameRequest.model_validate(data))
    except PydanticValidationError as e:
        first = e.errors()[0]
        return Failure(
            error=ValidationError(
                code=ErrorCode.MALFORMED_BODY,
                message=MESSAGE_MALFORMED_BODY,
                field=".".join(str(part) for part in first["loc"]) or None,
                details={"reason": first["msg"]},
            )
        )


def validate_request(
    method: str | None, body: str | None
) -> Result[FullName, ValidationError]:
    """Validate a raw request against the endpoint's rules.

    Checks run in order and the first failing check decides the outcome:
    method, body presence, JSON shape, name presence.

    Args:
        method: HTTP method (case-insensitive). Missing counts as not POST.
        body: Raw request body, if any.

    Returns:
        Success with FullName, or Failure with a ValidationError coded
        METHOD_NOT_ALLOWED, EMPTY_BODY, MALFORMED_BODY or MISSING_FIELDS.
    """
    if (method or "").upper() != "POST":
        return Failure(
            error=ValidationError(
                code=ErrorCode.METHOD_NOT_ALLOWED,
                message=MESSAGE_METHOD_NOT_ALLOWED,
                details={"method": method or ""},
            )
        )

    if not body:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMPTY_BODY,
                message=MESSAGE_EMPTY_BODY,
            )
        )

    parsed = parse_name_request(body)
    if isinstance(parsed, Failure):
        return parsed

    first_name = parsed.value.first_name
    last_name = parsed.value.last_name
    if first_name is None or last_name is None or _is_blank(first_name) or _is_blank(last_name):
        return Failure(
            error=ValidationError(
                code=ErrorCode.MISSING_FIELDS,
                message=MESSAGE_MISSING_FIELDS,
                field="FirstName" if _is_blank(first_name) else "LastName",
            )
        )

    return Success(value=FullName(first_name, last_name))
