"""Pact document schemas.

Models the subset of the Pact specification (V2-V4) used for contract
verification: participants and HTTP interactions. Unknown keys such as
matchingRules, metadata or pending flags are ignored.

Pact V4 files wrap bodies as {"content": ..., "contentType": ..., "encoded":
false} and store header values as lists of strings; older files use bare
bodies and string header values. Both shapes are accepted.
"""

import json
from typing import Any

from pydantic import BaseModel, Field

_BODY_WRAPPER_KEYS = {"content", "contentType", "contentTypeHint", "encoded"}


def _unwrap_body(body: Any) -> Any:
    """Return the JSON content of a pact body, unwrapping V4 body objects."""
    if isinstance(body, dict) and "content" in body and set(body) <= _BODY_WRAPPER_KEYS:
        return body["content"]
    return body


def _first_header_value(value: str | list[str]) -> str:
    """Collapse a pact header value (string or list) to one string."""
    if isinstance(value, list):
        return ", ".join(value)
    return value


class PactParticipant(BaseModel):
    """Consumer or provider entry of a pact document."""

    name: str


class InteractionRequest(BaseModel):
    """Request half of a recorded interaction.

    Attributes:
        method: HTTP method.
        path: Request path relative to the provider base URL.
        headers: Recorded request headers.
        body: Recorded request body (possibly V4-wrapped).
    """

    method: str
    path: str = "/"
    headers: dict[str, str | list[str]] | None = None
    body: Any = None

    @property
    def content(self) -> Any:
        """Unwrapped JSON body, or None when no body was recorded."""
        return _unwrap_body(self.body)

    def body_text(self) -> str | None:
        """Render the body as it is sent on the wire.

        Returns:
            Compact JSON text, the raw string for non-JSON string bodies,
            or None when no body was recorded.
        """
        content = self.content
        if content is None:
            return None
        if isinstance(self.body, dict) and isinstance(content, str):
            # Wrapped non-JSON payload; send verbatim
            return content
        return json.dumps(content, separators=(",", ":"))

    def header_values(self) -> dict[str, str]:
        """Recorded headers flattened to single string values."""
        return {
            name: _first_header_value(value)
            for name, value in (self.headers or {}).items()
        }


class InteractionResponse(BaseModel):
    """Expected response half of a recorded interaction.

    Attributes:
        status: Expected HTTP status code (exact match).
        headers: Expected headers (presence check only).
        body: Expected body (shape match only, possibly V4-wrapped).
    """

    status: int
    headers: dict[str, str | list[str]] | None = None
    body: Any = None

    @property
    def content(self) -> Any:
        """Unwrapped expected JSON body, or None when none was recorded."""
        return _unwrap_body(self.body)


class Interaction(BaseModel):
    """Recorded request/expected-response pair.

    Attributes:
        description: Human-readable description, used in failure messages.
        request: Request to replay.
        response: Expected response shape.
    """

    description: str
    request: InteractionRequest
    response: InteractionResponse


class PactDocument(BaseModel):
    """Pact file contents.

    Attributes:
        consumer: Consuming application.
        provider: Providing application.
        interactions: Ordered interactions; each one is independent.
    """

    consumer: PactParticipant | None = None
    provider: PactParticipant | None = None
    interactions: list[Interaction] = Field(default_factory=list)
