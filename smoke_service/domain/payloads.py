"""Pure payload builders for the health and greeting endpoints."""

from .clock import Clock, domain_format_timestamp
from .models import GREETING_MESSAGE, HEALTHY_STATUS, GreetingPayload, HealthStatus


def domain_build_health_status(clock: Clock) -> HealthStatus:
    """Build the liveness payload for the current moment.

    Args:
        clock: Zero-argument callable returning the current time.

    Returns:
        HealthStatus: Healthy status stamped with the clock reading.
    """

    return HealthStatus(status=HEALTHY_STATUS, timestamp=domain_format_timestamp(clock()))


def domain_build_greeting(version: str, environment: str, clock: Clock) -> GreetingPayload:
    """Build the greeting payload for the current moment.

    Args:
        version: Application version label from settings.
        environment: Runtime environment label from settings.
        clock: Zero-argument callable returning the current time.

    Returns:
        GreetingPayload: Greeting stamped with the clock reading.
    """

    return GreetingPayload(
        message=GREETING_MESSAGE,
        version=version,
        environment=environment,
        timestamp=domain_format_timestamp(clock()),
    )
