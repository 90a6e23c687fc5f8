"""FastAPI application factory for the smoke-test responder.

The application exposes exactly two routes. Generated documentation routes and
trailing-slash redirects are disabled, so every other request falls through to
the explicit 404 handler.
"""

from fastapi import FastAPI

from smoke_service.config import AppSettings
from smoke_service.domain import Clock, domain_utc_now

from .errors import api_register_fallback_handlers
from .routers import api_create_greeting_router, api_create_health_router


def create_api_application(settings: AppSettings, clock: Clock | None = None) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings captured at startup.
        clock: Optional time source; defaults to the UTC wall clock.

    Returns:
        FastAPI: Framework application with health, greeting and fallback handlers.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    resolved_clock = clock or domain_utc_now
    application = FastAPI(
        title="Fargate Smoke Service",
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    application.include_router(api_create_health_router(clock=resolved_clock))
    application.include_router(api_create_greeting_router(settings=settings, clock=resolved_clock))
    api_register_fallback_handlers(application)

    return application
