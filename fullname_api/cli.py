"""Consumer program for a LocalStack deployment of the endpoint.

Waits for LocalStack to report healthy, then runs three canned scenarios
against the deployed API Gateway stage and prints a pass/fail line for each:

1. Bad request (missing last name)   -> expects 400
2. Bad request (missing first name)  -> expects 400
3. Successful request                -> expects 200

Usage:
    fullname-consumer <api-id>
"""

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from rich.console import Console

from fullname_api.core.config import Settings, get_settings
from fullname_api.core.container import build_logger
from fullname_api.core.result import Failure
from fullname_api.infrastructure.http.api_gateway_client import (
    ApiGatewayClient,
    ApiResponse,
)

EXAMPLE_API_ID = "jo6ttjff2g"


@dataclass(frozen=True, slots=True)
class Scenario:
    """One canned request and the status it must produce."""

    title: str
    label: str
    expected_status: int
    send: Callable[[ApiGatewayClient], Awaitable[ApiResponse]]


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        title="Bad Request (missing lastName)",
        label="Bad request",
        expected_status=400,
        send=lambda client: client.send_missing_last_name("John"),
    ),
    Scenario(
        title="Bad Request (missing firstName)",
        label="Bad request",
        expected_status=400,
        send=lambda client: client.send_missing_first_name("Doe"),
    ),
    Scenario(
        title="Successful Request",
        label="Successful request",
        expected_status=200,
        send=lambda client: client.send_valid("John", "Doe"),
    ),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="fullname-consumer",
        description="Exercise the full name endpoint deployed to LocalStack",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Example:
  %(prog)s {EXAMPLE_API_ID}

Environment:
  LOCALSTACK_URL               LocalStack edge URL (default: http://localhost:4566)
  API_STAGE                    API Gateway stage (default: prod)
  READINESS_MAX_ATTEMPTS       Health probes before giving up (default: 30)
  READINESS_INTERVAL_SECONDS   Delay between probes (default: 2)
        """,
    )
    parser.add_argument(
        "api_id",
        nargs="?",
        help="API Gateway REST API id of the deployed endpoint",
    )
    return parser


async def run_scenario(
    client: ApiGatewayClient, scenario: Scenario, console: Console
) -> bool:
    """Send one scenario and print its outcome.

    Returns:
        True when the response status matched the expectation.
    """
    response = await scenario.send(client)

    console.print(f"📤 Sending request: {response.request_body_sent}", markup=False)
    console.print(f"📥 Response Status: {response.status_code}", markup=False)
    console.print(f"📥 Response Body: {response.body}", markup=False)

    if response.status_code == scenario.expected_status:
        console.print(
            f"[green]✅ {scenario.label} test passed - received expected "
            f"{scenario.expected_status} status[/green]"
        )
        return True

    console.print(
        f"[red]❌ {scenario.label} test failed - expected "
        f"{scenario.expected_status}, got {response.status_code}[/red]"
    )
    return False


async def run(
    api_id: str,
    *,
    config: Settings,
    console: Console,
    client: ApiGatewayClient | None = None,
) -> int:
    """Wait for LocalStack and run every scenario.

    Args:
        api_id: API Gateway REST API id.
        config: Settings providing URLs, timeouts and readiness bounds,
            and the log level and renderer for client logging.
        console: Output console.
        client: Pre-built client (tests); otherwise one is created and
            closed here.

    Returns:
        Process exit code: 0 once every scenario ran, 1 when LocalStack
        never became ready.
    """
    build_logger(config)
    endpoint = config.endpoint_url(api_id)
    console.print(f"📋 Using API ID: {api_id}", markup=False)
    console.print(f"🔗 API Gateway endpoint: {endpoint}", markup=False)

    api_client = client or ApiGatewayClient(
        base_url=endpoint,
        timeout=config.client_timeout,
        market_id=config.market_id,
    )
    async with api_client:
        console.print("Waiting for LocalStack to be ready...")
        readiness = await api_client.wait_until_ready(
            config.health_url,
            max_attempts=config.readiness_max_attempts,
            interval=config.readiness_interval_seconds,
            on_attempt=lambda attempt, total: console.print(
                f"⏳ Waiting for LocalStack... (attempt {attempt}/{total})", markup=False
            ),
        )
        if isinstance(readiness, Failure):
            console.print(
                f"[bold red]❌ LocalStack did not become ready within the expected "
                f"time ({readiness.error.attempts} attempts)[/bold red]"
            )
            return 1
        console.print("[green]✅ LocalStack is ready![/green]")

        for index, scenario in enumerate(SCENARIOS, start=1):
            console.print()
            console.print(f"🧪 Test {index}: {scenario.title}", markup=False)
            await run_scenario(api_client, scenario, console)

    console.print()
    console.print("[bold green]✅ All tests completed![/bold green]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``fullname-consumer``.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    console = Console()

    console.print("[bold]=== API Gateway Lambda Consumer ===[/bold]")
    if not args.api_id:
        console.print("❌ Please provide the API ID as a command-line argument.", markup=False)
        console.print("Usage: fullname-consumer <api-id>", markup=False)
        console.print(f"Example: fullname-consumer {EXAMPLE_API_ID}", markup=False)
        return 0

    return asyncio.run(run(args.api_id, config=get_settings(), console=console))


if __name__ == "__main__":
    sys.exit(main())
