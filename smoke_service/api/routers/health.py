"""Health endpoint router composition for liveness checks."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from smoke_service.domain import Clock, domain_build_health_status


def api_create_health_router(clock: Clock) -> APIRouter:
    """Create liveness router answering while the process is alive.

    Args:
        clock: Zero-argument callable returning the current time.

    Returns:
        APIRouter: Router exposing `GET /health`.

    Raises:
        ValueError: Raised when clock is None.
    """

    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return liveness state with the current timestamp.

        Returns:
            JSONResponse: Healthy payload with HTTP 200.
        """

        health_status = domain_build_health_status(clock=clock)
        return JSONResponse(content=asdict(health_status), status_code=status.HTTP_200_OK)

    return router
