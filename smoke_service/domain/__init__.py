"""Domain models and pure payload builders used by the API layer."""

from .clock import Clock, domain_format_timestamp, domain_utc_now
from .models import GREETING_MESSAGE, HEALTHY_STATUS, GreetingPayload, HealthStatus
from .payloads import domain_build_greeting, domain_build_health_status

__all__ = [
    "Clock",
    "GREETING_MESSAGE",
    "HEALTHY_STATUS",
    "GreetingPayload",
    "HealthStatus",
    "domain_build_greeting",
    "domain_build_health_status",
    "domain_format_timestamp",
    "domain_utc_now",
]
