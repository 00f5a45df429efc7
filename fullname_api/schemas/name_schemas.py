"""Request and response schemas for the name endpoint.

The wire format uses PascalCase request keys (FirstName, LastName) and
camelCase response keys (fullName). Response bodies are rendered as compact
JSON so identical requests yield byte-identical responses.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NameRequest(BaseModel):
    """Name payload sent to the endpoint.

    Both fields are optional on the wire; the request validator enforces
    presence. Strict mode rejects non-string values instead of coercing them.

    Attributes:
        first_name: First name (wire key FirstName, firstName also accepted).
        last_name: Last name (wire key LastName, lastName also accepted).

    Example:
        >>> NameRequest(first_name="John").to_json()
        '{"FirstName":"John"}'
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    first_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FirstName", "firstName"),
        serialization_alias="FirstName",
    )
    last_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LastName", "lastName"),
        serialization_alias="LastName",
    )

    def to_json(self) -> str:
        """Serialize by wire alias, omitting absent fields.

        Returns:
            Compact JSON text.
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error body returned for every non-200 response.

    Attributes:
        error: Human-readable error message.
    """

    error: str


class SuccessResponse(BaseModel):
    """Body returned when both names are present.

    Attributes:
        message: Fixed acknowledgment text.
        full_name: First and last name joined by a single space.
    """

    message: str
    full_name: str = Field(serialization_alias="fullName")
