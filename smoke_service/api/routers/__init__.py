"""API router package for endpoint composition."""

from .greeting import api_create_greeting_router
from .health import api_create_health_router

__all__ = ["api_create_greeting_router", "api_create_health_router"]
