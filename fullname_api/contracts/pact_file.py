"""Pact file loading."""

import json
from pathlib import Path

from fullname_api.schemas.contract_schemas import PactDocument


class PactFileError(Exception):
    """Pact file is missing, unreadable or not a valid pact document."""


def load_pact(path: str | Path) -> PactDocument:
    """Load and validate a pact file.

    Args:
        path: Location of the pact JSON document.

    Returns:
        PactDocument with its interactions in file order.

    Raises:
        PactFileError: If the file cannot be read or does not match the
            pact schema.
    """
    pact_path = Path(path)
    try:
        raw = pact_path.read_text(encoding="utf-8")
    except OSError as e:
        raise PactFileError(f"Cannot read pact file {pact_path}: {e}") from e

    try:
        return PactDocument.model_validate(json.loads(raw))
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        raise PactFileError(f"Invalid pact file {pact_path}: {e}") from e
