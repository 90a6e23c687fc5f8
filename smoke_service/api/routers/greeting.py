"""Greeting endpoint router echoing deployment metadata."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from smoke_service.config import AppSettings
from smoke_service.domain import Clock, domain_build_greeting


def api_create_greeting_router(settings: AppSettings, clock: Clock) -> APIRouter:
    """Create greeting router bound to startup settings.

    Args:
        settings: Validated settings supplying version and environment labels.
        clock: Zero-argument callable returning the current time.

    Returns:
        APIRouter: Router exposing `GET /`.

    Raises:
        ValueError: Raised when settings or clock is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["greeting"])

    @router.get("/")
    def api_greeting() -> JSONResponse:
        """Return the greeting with deployment metadata and the current timestamp.

        Returns:
            JSONResponse: Greeting payload with HTTP 200.
        """

        greeting = domain_build_greeting(
            version=settings.app_version,
            environment=settings.node_env,
            clock=clock,
        )
        return JSONResponse(content=asdict(greeting), status_code=status.HTTP_200_OK)

    return router
