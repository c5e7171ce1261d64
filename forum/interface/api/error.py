"""Exception handlers translating failures into HTTP responses.

Client faults use ``{"status": "fail", ...}``; anything else becomes a 500
with ``{"status": "error", ...}`` and never leaks internal details.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.AUTHORIZATION: status.HTTP_403_FORBIDDEN,
}

SERVER_ERROR_MESSAGE = "terjadi kegagalan pada server kami"


def envelope(status_code: int, message: str, outcome: str = "fail") -> JSONResponse:
    """Build an error response in the API envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"status": outcome, "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain, request validation, HTTP and catch-all handlers."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = STATUS_BY_KIND[exc.kind]
        logfire.warn(
            "Request failed",
            path=request.url.path,
            kind=exc.kind.value,
            error=str(exc),
        )
        return envelope(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logfire.warn("Malformed request", path=request.url.path, errors=exc.errors())
        return envelope(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception(
            "Unhandled error on {path}",
            path=request.url.path,
            error_type=type(exc).__name__,
        )
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE, outcome="error"
        )
