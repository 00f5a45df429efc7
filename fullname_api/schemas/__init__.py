"""Pydantic schemas for wire payloads and pact documents."""

from fullname_api.schemas.contract_schemas import (
    Interaction,
    InteractionRequest,
    InteractionResponse,
    PactDocument,
    PactParticipant,
)
from fullname_api.schemas.name_schemas import (
    ErrorResponse,
    NameRequest,
    SuccessResponse,
)

__all__ = [
    "ErrorResponse",
    "Interaction",
    "InteractionRequest",
    "InteractionResponse",
    "NameRequest",
    "PactDocument",
    "PactParticipant",
    "SuccessResponse",
]
