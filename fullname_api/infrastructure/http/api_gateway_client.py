"""API client for the full name endpoint.

This module provides the client used by the consumer program and by the
contract verifier. It handles:
- Building name payloads (valid, missing first name, missing last name)
- Raw request dispatch (malformed bodies, arbitrary methods and paths)
- Transport error handling (timeouts, refused connections, bad URLs)
- Readiness polling against a health endpoint

Every send operation returns an ApiResponse and never raises: transport
failures, unserializable payloads and unencodable headers are converted to
a 500 ApiResponse carrying the error description, mirroring how the
handler converts its own failures.

Architecture:
    - Infrastructure layer (adapter for the HTTP endpoint)
    - Uses httpx for async HTTP
    - Scoped resource: ``async with ApiGatewayClient(...) as client``
"""

import asyncio
import json
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any, Self

import httpx
import structlog

from fullname_api.core.constants import (
    CLIENT_TIMEOUT_DEFAULT,
    JSON_REQUEST_CONTENT_TYPE,
    LOG_BODY_MAX_LENGTH,
    MARKET_ID_HEADER,
)
from fullname_api.core.enums import ErrorCode
from fullname_api.core.result import Failure, Result, Success
from fullname_api.domain.errors import ReadinessError
from fullname_api.schemas.name_schemas import NameRequest

_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)
# Unserializable payloads and header/body values that cannot be encoded
_ENCODING_ERRORS = (TypeError, ValueError)


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Outcome of one client call.

    Attributes:
        status_code: HTTP status (500 for transport failures).
        body: Response text, or the error description on transport failure.
        is_success: True for 2xx responses.
        request_body_sent: Body that was sent ("" when none).
        headers: Response headers (lower-cased names; empty on failure).
    """

    status_code: int
    body: str
    is_success: bool
    request_body_sent: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)


class ApiGatewayClient:
    """Async client for the full name endpoint.

    Attributes:
        _base_url: Endpoint URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _market_id: Optional X-Market-Id header value.
        _client: Underlying httpx client.
        _owns_client: Whether aclose() closes the httpx client.

    Example:
        >>> async with ApiGatewayClient(base_url=endpoint) as client:
        ...     response = await client.send_valid("John", "Doe")
        ...     response.status_code
        200
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = CLIENT_TIMEOUT_DEFAULT,
        market_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Endpoint URL, e.g. a LocalStack ``_user_request_`` URL.
            timeout: HTTP request timeout in seconds (ignored when
                ``http_client`` is given).
            market_id: Optional market identifier sent as X-Market-Id.
            http_client: Pre-configured httpx client (in-process transports,
                mock transports). Not closed by this client.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._market_id = market_id
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._logger = structlog.get_logger("api_gateway_client")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def url_for(self, path: str | None = None) -> str:
        """Resolve a request path against the endpoint URL.

        Args:
            path: Path relative to the endpoint; None targets the endpoint
                itself (with its trailing slash).

        Returns:
            Absolute URL.
        """
        if not path:
            return f"{self._base_url}/"
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._base_url}{path}"

    # ------------------------------------------------------------------
    # Canned scenarios
    # ------------------------------------------------------------------

    async def send_valid(self, first_name: str, last_name: str) -> ApiResponse:
        """POST a payload with both names."""
        return await self.send(NameRequest(first_name=first_name, last_name=last_name))

    async def send_missing_first_name(self, last_name: str) -> ApiResponse:
        """POST a payload without the FirstName key."""
        return await self.send(NameRequest(last_name=last_name))

    async def send_missing_last_name(self, first_name: str) -> ApiResponse:
        """POST a payload without the LastName key."""
        return await self.send(NameRequest(first_name=first_name))

    async def send_get(self) -> ApiResponse:
        """GET the endpoint without a body."""
        return await self.send_raw(None, method="GET")

    # ------------------------------------------------------------------
    # Generic dispatch
    # ------------------------------------------------------------------

    async def send(
        self,
        payload: NameRequest | Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """POST a JSON payload.

        Args:
            payload: NameRequest (serialized by wire alias, absent fields
                omitted) or any JSON-serializable mapping.
            headers: Header overrides merged over the defaults.

        Returns:
            ApiResponse for the call.
        """
        try:
            if isinstance(payload, NameRequest):
                body = payload.to_json()
            else:
                body = json.dumps(payload, separators=(",", ":"))
        except _ENCODING_ERRORS as e:
            return self._failed_response("POST", self.url_for(), e, sent="")
        return await self.send_raw(body, headers=headers)

    async def send_raw(
        self,
        body: str | None,
        *,
        method: str = "POST",
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Send a request with an arbitrary body, method and path.

        Args:
            body: Body text sent verbatim (None sends no body).
            method: HTTP method.
            path: Path relative to the endpoint URL.
            headers: Header overrides merged over the defaults.

        Returns:
            ApiResponse; transport failures and bodies or headers that
            cannot be encoded become a 500 ApiResponse.
        """
        request_headers: dict[str, str] = {}
        if body is not None:
            request_headers["Content-Type"] = JSON_REQUEST_CONTENT_TYPE
        if self._market_id:
            request_headers[MARKET_ID_HEADER] = self._market_id
        request_headers.update(headers or {})

        url = self.url_for(path)
        sent = body or ""
        try:
            content = body.encode("utf-8") if body is not None else None
            response = await self._client.request(
                method.upper(), url, content=content, headers=request_headers
            )
        except _TRANSPORT_ERRORS + _ENCODING_ERRORS as e:
            return self._failed_response(method, url, e, sent=sent)

        self._logger.debug(
            "api_request_completed",
            method=method.upper(),
            url=url,
            status_code=response.status_code,
            body=response.text[:LOG_BODY_MAX_LENGTH],
        )
        return ApiResponse(
            status_code=response.status_code,
            body=response.text,
            is_success=response.is_success,
            request_body_sent=sent,
            headers=dict(response.headers),
        )

    def _failed_response(
        self, method: str, url: str, error: Exception, *, sent: str
    ) -> ApiResponse:
        """Log a request that never got a response and report it as a 500."""
        self._logger.warning(
            "api_request_failed",
            method=method.upper(),
            url=url,
            error_type=type(error).__name__,
            error=str(error),
        )
        return ApiResponse(
            status_code=500,
            body=str(error) or type(error).__name__,
            is_success=False,
            request_body_sent=sent,
        )

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------

    async def wait_until_ready(
        self,
        health_url: str,
        *,
        max_attempts: int = 30,
        interval: float = 2.0,
        on_attempt: Callable[[int, int], None] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> Result[int, ReadinessError]:
        """Poll a health endpoint until it answers with a 2xx status.

        Args:
            health_url: Absolute health check URL.
            max_attempts: Number of probes before giving up.
            interval: Delay between probes in seconds.
            on_attempt: Called with (attempt, max_attempts) after each
                failed probe.
            sleep: Awaitable delay function.

        Returns:
            Success with the 1-based attempt that succeeded, or
            Failure(ReadinessError) once every attempt has failed.
        """
        for attempt in range(1, max_attempts + 1):
            try:
                response = await self._client.get(health_url)
                if response.is_success:
                    self._logger.info("endpoint_ready", url=health_url, attempt=attempt)
                    return Success(value=attempt)
            except _TRANSPORT_ERRORS as e:
                self._logger.debug(
                    "endpoint_not_ready", url=health_url, attempt=attempt, error=str(e)
                )

            if on_attempt is not None:
                on_attempt(attempt, max_attempts)
            if attempt < max_attempts:
                await sleep(interval)

        self._logger.warning("endpoint_never_ready", url=health_url, attempts=max_attempts)
        return Failure(
            error=ReadinessError(
                code=ErrorCode.ENDPOINT_NOT_READY,
                message="Endpoint did not become ready within the expected time",
                url=health_url,
                attempts=max_attempts,
            )
        )
