"""Contract verification against recorded pact interactions.

Usage:
    from fullname_api.contracts import ContractVerifier, load_pact

    pact = load_pact("pacts/FullNameApi.Consumer-FullNameApi.Provider.json")
    report = await ContractVerifier(client).verify(pact.interactions)
    report.raise_for_failures()
"""

from fullname_api.contracts.matching import ShapeMismatch, json_kind, match_shape
from fullname_api.contracts.pact_file import PactFileError, load_pact
from fullname_api.contracts.verifier import (
    ContractVerificationError,
    ContractVerifier,
    VerificationReport,
)

__all__ = [
    "ContractVerificationError",
    "ContractVerifier",
    "PactFileError",
    "ShapeMismatch",
    "VerificationReport",
    "json_kind",
    "load_pact",
    "match_shape",
]
