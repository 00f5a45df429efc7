"""Lambda context stand-in for running the handler outside AWS."""

from dataclasses import dataclass, field
from uuid import uuid4


def _new_request_id() -> str:
    return str(uuid4())


@dataclass(slots=True)
class LocalLambdaContext:
    """Subset of the AWS Lambda context object read by the handler.

    Attributes:
        aws_request_id: Unique request identifier (fresh per invocation).
        function_name: Function name reported in logs.
        function_version: Function version.
        memory_limit_in_mb: Configured memory.
    """

    aws_request_id: str = field(default_factory=_new_request_id)
    function_name: str = "FullNameApi"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 256
