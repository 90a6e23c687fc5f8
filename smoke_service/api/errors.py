"""Explicit fallback handlers for unmatched routes and malformed requests."""

from typing import Final

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

NOT_FOUND_DETAIL: Final[str] = "Not Found"
BAD_REQUEST_DETAIL: Final[str] = "Bad Request"

# Wrong method on a known path is reported exactly like an unknown path.
_NOT_FOUND_STATUS_CODES: Final[frozenset[int]] = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)


def api_register_fallback_handlers(application: FastAPI) -> None:
    """Register 404 and 400 handlers on the application.

    Args:
        application: FastAPI application to configure.

    Returns:
        None: Handlers are registered as a side effect.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")

    @application.exception_handler(StarletteHTTPException)
    async def api_handle_http_exception(_request: Request, error: StarletteHTTPException) -> JSONResponse:
        """Map routing failures to a fixed 404 body and pass others through.

        Args:
            _request: Incoming request, unused.
            error: Raised HTTP exception.

        Returns:
            JSONResponse: Error payload with resolved status code.
        """

        if error.status_code in _NOT_FOUND_STATUS_CODES:
            return JSONResponse(content={"detail": NOT_FOUND_DETAIL}, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(
            content={"detail": error.detail},
            status_code=error.status_code,
            headers=getattr(error, "headers", None),
        )

    @application.exception_handler(RequestValidationError)
    async def api_handle_request_validation_error(_request: Request, _error: RequestValidationError) -> JSONResponse:
        """Answer request validation failures with a fixed 400 body.

        Args:
            _request: Incoming request, unused.
            _error: Raised validation error, unused.

        Returns:
            JSONResponse: Bad request payload with HTTP 400.
        """

        return JSONResponse(content={"detail": BAD_REQUEST_DETAIL}, status_code=status.HTTP_400_BAD_REQUEST)
