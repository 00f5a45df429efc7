"""Contract verifier.

Replays recorded interactions against a live provider through
ApiGatewayClient and checks each response:

1. Status code matches exactly.
2. Every expected header name is present (case-insensitive, value ignored).
3. Every expected body key is present with the same JSON kind, recursively.

Each interaction is independent: a failure stops checks for that interaction
only, and interactions may be replayed sequentially or concurrently.
"""

import asyncio
import json
from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from fullname_api.contracts.matching import match_shape
from fullname_api.core.enums import ErrorCode
from fullname_api.core.result import Failure, Result, Success
from fullname_api.domain.errors import ContractViolation
from fullname_api.infrastructure.http.api_gateway_client import (
    ApiGatewayClient,
    ApiResponse,
)
from fullname_api.schemas.contract_schemas import Interaction


class ContractVerificationError(AssertionError):
    """One or more interactions failed verification."""

    def __init__(self, failures: list[ContractViolation]) -> None:
        self.failures = failures
        lines = "\n".join(f"  - {failure.message}" for failure in failures)
        super().__init__(f"{len(failures)} interaction(s) failed verification:\n{lines}")


@dataclass(slots=True)
class VerificationReport:
    """Outcome of verifying a set of interactions.

    Attributes:
        passed: Descriptions of interactions that verified.
        failures: Violations, one per failed interaction.
    """

    passed: list[str] = field(default_factory=list)
    failures: list[ContractViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every interaction verified."""
        return not self.failures

    def raise_for_failures(self) -> None:
        """Raise ContractVerificationError if any interaction failed.

        Raises:
            ContractVerificationError: Listing every failed interaction.
        """
        if self.failures:
            raise ContractVerificationError(self.failures)


class ContractVerifier:
    """Verify recorded interactions against a running provider.

    Example:
        >>> verifier = ContractVerifier(client)
        >>> report = await verifier.verify(pact.interactions)
        >>> report.ok
        True
    """

    def __init__(self, client: ApiGatewayClient) -> None:
        """Initialize the verifier.

        Args:
            client: Client pointed at the provider's base URL.
        """
        self._client = client
        self._logger = structlog.get_logger("contract_verifier")

    async def verify(
        self, interactions: Iterable[Interaction], *, concurrent: bool = False
    ) -> VerificationReport:
        """Verify every interaction.

        Args:
            interactions: Interactions to replay.
            concurrent: Replay all interactions at once with asyncio.gather.

        Returns:
            VerificationReport in interaction order.
        """
        interactions = list(interactions)
        if concurrent:
            results = await asyncio.gather(
                *(self.verify_interaction(interaction) for interaction in interactions)
            )
        else:
            results = [await self.verify_interaction(i) for i in interactions]

        report = VerificationReport()
        for result in results:
            match result:
                case Success(value=interaction):
                    report.passed.append(interaction.description)
                case Failure(error=violation):
                    report.failures.append(violation)

        self._logger.info(
            "contract_verification_completed",
            passed=len(report.passed),
            failed=len(report.failures),
        )
        return report

    async def verify_interaction(
        self, interaction: Interaction
    ) -> Result[Interaction, ContractViolation]:
        """Replay one interaction and check the response shape.

        Args:
            interaction: Interaction to replay.

        Returns:
            Success with the interaction, or Failure with the first violation.
        """
        request = interaction.request
        self._logger.debug(
            "verifying_interaction",
            description=interaction.description,
            method=request.method,
            path=request.path,
        )

        response = await self._client.send_raw(
            request.body_text(),
            method=request.method,
            path=request.path,
            headers=request.header_values(),
        )

        violation = (
            self._check_status(interaction, response)
            or self._check_headers(interaction, response)
            or self._check_body(interaction, response)
        )
        if violation is not None:
            self._logger.warning(
                "interaction_failed",
                description=interaction.description,
                code=violation.code.value,
                location=violation.location,
            )
            return Failure(error=violation)

        self._logger.debug("interaction_verified", description=interaction.description)
        return Success(value=interaction)

    @staticmethod
    def _check_status(
        interaction: Interaction, response: ApiResponse
    ) -> ContractViolation | None:
        expected = interaction.response.status
        if response.status_code == expected:
            return None
        return ContractViolation(
            code=ErrorCode.CONTRACT_STATUS_MISMATCH,
            message=(
                f"{interaction.description}: expected status {expected}, "
                f"got {response.status_code}"
            ),
            interaction=interaction.description,
            location="status",
        )

    @staticmethod
    def _check_headers(
        interaction: Interaction, response: ApiResponse
    ) -> ContractViolation | None:
        actual = {name.lower() for name in response.headers}
        for name in interaction.response.headers or {}:
            if name.lower() not in actual:
                return ContractViolation(
                    code=ErrorCode.CONTRACT_HEADER_MISSING,
                    message=(
                        f"{interaction.description}: expected header "
                        f"'{name}' not found in response"
                    ),
                    interaction=interaction.description,
                    location=name,
                )
        return None

    @staticmethod
    def _check_body(
        interaction: Interaction, response: ApiResponse
    ) -> ContractViolation | None:
        expected = interaction.response.content
        if expected is None:
            return None

        try:
            actual = json.loads(response.body)
        except ValueError as e:
            return ContractViolation(
                code=ErrorCode.CONTRACT_BODY_NOT_JSON,
                message=f"{interaction.description}: response body is not JSON ({e})",
                interaction=interaction.description,
                location="$",
            )

        mismatch = match_shape(expected, actual)
        if mismatch is None:
            return None
        return ContractViolation(
            code=mismatch.code,
            message=f"{interaction.description}: {mismatch.describe()}",
            interaction=interaction.description,
            location=mismatch.location,
        )
