"""Unit tests for ApiGatewayClient.

Tests cover:
- Payload shapes of the canned scenarios
- Default and overridden headers
- Transport failures converted to 500 responses
- Readiness polling bounds

Architecture:
- Uses pytest-httpx for HTTP mocking
- No network access
"""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from fullname_api.core.enums import ErrorCode
from fullname_api.core.result import Failure, Success
from fullname_api.infrastructure.http.api_gateway_client import ApiGatewayClient

BASE_URL = "http://localhost:4566/restapis/abc123/prod/_user_request_/"
HEALTH_URL = "http://localhost:4566/_localstack/health"


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
async def client():
    """ApiGatewayClient owning its httpx client."""
    async with ApiGatewayClient(base_url=BASE_URL, timeout=5.0) as api_client:
        yield api_client


@pytest.fixture
async def eu_client():
    """ApiGatewayClient sending an X-Market-Id header."""
    async with ApiGatewayClient(base_url=BASE_URL, market_id="EU") as api_client:
        yield api_client


# =============================================================================
# Test: canned scenarios
# =============================================================================


@pytest.mark.unit
class TestScenarioPayloads:
    """Canned scenarios send the documented bodies."""

    async def test_send_valid(self, client: ApiGatewayClient, httpx_mock: HTTPXMock):
        """Both names are sent with the JSON content type."""
        httpx_mock.add_response(
            method="POST",
            url=BASE_URL,
            json={"message": "Request processed successfully", "fullName": "John Doe"},
        )

        response = await client.send_valid("John", "Doe")

        request = httpx_mock.get_request()
        assert request is not None
        assert json.loads(request.content) == {"FirstName": "John", "LastName": "Doe"}
        assert request.headers["Content-Type"] == "application/json; charset=utf-8"
        assert response.status_code == 200
        assert response.is_success is True
        assert response.request_body_sent == '{"FirstName":"John","LastName":"Doe"}'

    async def test_send_missing_first_name_omits_key(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", url=BASE_URL, status_code=400)

        await client.send_missing_first_name("Doe")

        assert json.loads(httpx_mock.get_request().content) == {"LastName": "Doe"}

    async def test_send_missing_last_name_omits_key(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", url=BASE_URL, status_code=400)

        await client.send_missing_last_name("John")

        assert json.loads(httpx_mock.get_request().content) == {"FirstName": "John"}

    async def test_send_get_has_no_body(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        """GET carries neither a body nor a Content-Type."""
        httpx_mock.add_response(
            method="GET", url=BASE_URL, status_code=405, json={"error": "x"}
        )

        response = await client.send_get()

        request = httpx_mock.get_request()
        assert request.content == b""
        assert "Content-Type" not in request.headers
        assert response.status_code == 405
        assert response.is_success is False
        assert response.request_body_sent == ""


# =============================================================================
# Test: raw dispatch
# =============================================================================


@pytest.mark.unit
class TestRawDispatch:
    """send_raw sends bodies verbatim."""

    async def test_malformed_body_sent_verbatim(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", url=BASE_URL, status_code=400)

        await client.send_raw("{not json")

        assert httpx_mock.get_request().content == b"{not json"

    async def test_path_is_joined(self, client: ApiGatewayClient, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="GET", url=BASE_URL + "names")

        await client.send_raw(None, method="get", path="names")

        assert httpx_mock.get_request().method == "GET"

    async def test_market_id_header(
        self, eu_client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", url=BASE_URL)

        await eu_client.send_valid("John", "Doe")

        assert httpx_mock.get_request().headers["X-Market-Id"] == "EU"

    async def test_header_overrides(self, client: ApiGatewayClient, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=BASE_URL)

        await client.send({"FirstName": "John"}, headers={"Content-Type": "text/plain"})

        assert httpx_mock.get_request().headers["Content-Type"] == "text/plain"

    async def test_response_headers_are_captured(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST", url=BASE_URL, headers={"Content-Type": "application/json"}
        )

        response = await client.send_valid("John", "Doe")

        assert response.headers["content-type"] == "application/json"


# =============================================================================
# Test: transport failures
# =============================================================================


@pytest.mark.unit
class TestTransportFailures:
    """Transport errors never escape as exceptions."""

    async def test_connection_refused_is_500(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        response = await client.send_valid("John", "Doe")

        assert response.status_code == 500
        assert response.is_success is False
        assert "Connection refused" in response.body
        assert response.request_body_sent == '{"FirstName":"John","LastName":"Doe"}'

    async def test_timeout_is_500(self, client: ApiGatewayClient, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        response = await client.send_get()

        assert response.status_code == 500
        assert response.body == "timed out"

    async def test_unserializable_payload_is_500(self, client: ApiGatewayClient):
        """Payloads json cannot encode are reported, not raised."""
        response = await client.send({"FirstName": object()})

        assert response.status_code == 500
        assert response.is_success is False
        assert "not JSON serializable" in response.body
        assert response.request_body_sent == ""

    async def test_non_ascii_market_id_is_500(self):
        """Header values that cannot be encoded are reported, not raised."""
        async with ApiGatewayClient(
            base_url=BASE_URL, market_id="Zürich"
        ) as api_client:
            response = await api_client.send_valid("John", "Doe")

        assert response.status_code == 500
        assert response.is_success is False
        assert response.request_body_sent == '{"FirstName":"John","LastName":"Doe"}'

    async def test_non_ascii_header_override_is_500(self, client: ApiGatewayClient):
        response = await client.send_raw("{}", headers={"X-Market-Id": "Zürich"})

        assert response.status_code == 500

    async def test_unencodable_body_is_500(self, client: ApiGatewayClient):
        """A lone surrogate cannot be encoded as UTF-8."""
        response = await client.send_raw('{"FirstName":"\ud800"}')

        assert response.status_code == 500
        assert response.is_success is False


# =============================================================================
# Test: URL handling and ownership
# =============================================================================


@pytest.mark.unit
class TestUrlFor:
    """url_for resolves paths against the endpoint."""

    def test_no_path_keeps_trailing_slash(self):
        api_client = ApiGatewayClient(base_url=BASE_URL)

        assert api_client.url_for() == BASE_URL
        assert api_client.url_for("/") == BASE_URL

    def test_relative_path(self):
        api_client = ApiGatewayClient(base_url="http://host/api")

        assert api_client.url_for("names") == "http://host/api/names"


@pytest.mark.unit
class TestOwnership:
    """Injected httpx clients are left open."""

    async def test_injected_client_not_closed(self):
        http_client = httpx.AsyncClient()
        async with ApiGatewayClient(base_url=BASE_URL, http_client=http_client):
            pass

        assert http_client.is_closed is False
        await http_client.aclose()

    async def test_owned_client_closed(self):
        api_client = ApiGatewayClient(base_url=BASE_URL)

        await api_client.aclose()

        assert api_client._client.is_closed is True


# =============================================================================
# Test: readiness
# =============================================================================


@pytest.mark.unit
class TestReadiness:
    """wait_until_ready polls within bounds."""

    async def test_ready_on_third_attempt(
        self, client: ApiGatewayClient, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="GET", url=HEALTH_URL, status_code=503)
        httpx_mock.add_response(method="GET", url=HEALTH_URL, status_code=503)
        httpx_mock.add_response(method="GET", url=HEALTH_URL, json={"services": {}})
        delays: list[float] = []
        attempts: list[tuple[int, int]] = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        result = await client.wait_until_ready(
            HEALTH_URL,
            max_attempts=5,
            interval=2.0,
            on_attempt=lambda attempt, total: attempts.append((attempt, total)),
            sleep=fake_sleep,
        )

        assert result == Success(value=3)
        assert delays == [2.0, 2.0]
        assert attempts == [(1, 5), (2, 5)]

    async def test_never_ready(self, client: ApiGatewayClient, httpx_mock: HTTPXMock):
        for _ in range(3):
            httpx_mock.add_exception(httpx.ConnectError("refused"))
        delays: list[float] = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        result = await client.wait_until_ready(
            HEALTH_URL, max_attempts=3, interval=0.5, sleep=fake_sleep
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ENDPOINT_NOT_READY
        assert result.error.attempts == 3
        # No delay after the final attempt
        assert delays == [0.5, 0.5]
