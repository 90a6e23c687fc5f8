"""Typed response contracts produced fresh for every request.

Both payloads are plain frozen dataclasses; the API layer serializes them to
JSON with `dataclasses.asdict`.
"""

from dataclasses import dataclass
from typing import Final

HEALTHY_STATUS: Final[str] = "healthy"
GREETING_MESSAGE: Final[str] = "Hello from AWS ECS Fargate!"


@dataclass(frozen=True)
class HealthStatus:
    """Liveness response contract.

    Attributes:
        status: Always `healthy` while the process can answer.
        timestamp: Response time as ISO-8601 UTC text.
    """

    status: str
    timestamp: str


@dataclass(frozen=True)
class GreetingPayload:
    """Greeting response contract echoing deployment metadata.

    Attributes:
        message: Fixed greeting text.
        version: Deployed application version label.
        environment: Runtime environment label.
        timestamp: Response time as ISO-8601 UTC text.
    """

    message: str
    version: str
    environment: str
    timestamp: str
