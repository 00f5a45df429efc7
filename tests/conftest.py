"""Pytest configuration shared by every test package.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. Async tests are marked automatically
3. The pact fixture and the local host app are available as fixtures
"""

import inspect
import os
from pathlib import Path
from unittest.mock import MagicMock

os.environ.setdefault("ENVIRONMENT", "testing")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
import structlog  # noqa: E402

from fullname_api.core.config import settings  # noqa: E402
from fullname_api.infrastructure.http.api_gateway_client import ApiGatewayClient  # noqa: E402
from fullname_api.main import app  # noqa: E402

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PACT_FILE = PROJECT_ROOT / settings.pact_file

LOCAL_BASE_URL = "http://testserver"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: Tests against the locally hosted handler")
    config.addinivalue_line("markers", "contract: Pact contract tests")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop global structlog config after each test.

    ConsoleAdapter binds the current sys.stdout, which pytest's capture closes
    at teardown; later tests would otherwise log into a closed stream.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol call signatures."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def pact_file() -> Path:
    """Path of the recorded consumer/provider pact."""
    return PACT_FILE


@pytest_asyncio.fixture
async def local_client():
    """ApiGatewayClient wired to the local host app in-process.

    A fresh httpx transport per test keeps every test independent.
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport) as http_client:
        async with ApiGatewayClient(
            base_url=LOCAL_BASE_URL, http_client=http_client
        ) as client:
            yield client
