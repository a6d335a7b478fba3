"""Error Handlers: map every failure on the Person API to a PersonStoreError envelope.

Invariants:
    - Response body is always PersonStoreError.to_response(), whatever was raised
    - RequestValidationError → PayloadValidationError (400, per-field details)
    - Anything outside the hierarchy → UnexpectedError (500, exception text not leaked)
    - Log level follows the error's HTTP status: warning below 500, error at 500

Design Decisions:
    - Foreign exceptions converted into the hierarchy first, then one responder
      serializes and logs: REST and tool-call errors share a single vocabulary
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from person_mcp.core.errors import (
    ErrorContext,
    PayloadValidationError,
    PersonStoreError,
    UnexpectedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the three exception handlers on the FastAPI app."""

    @app.exception_handler(PersonStoreError)
    async def person_store_error_handler(request: Request, exc: PersonStoreError):
        return _respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = PayloadValidationError.from_errors(
            exc.errors(), "Invalid request data", _request_context(request),
        )
        return _respond(request, error)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return _respond(request, UnexpectedError(_request_context(request)))


def _request_context(request: Request) -> ErrorContext:
    return ErrorContext(operation=f"{request.method} {request.url.path}")


def _respond(request: Request, error: PersonStoreError) -> JSONResponse:
    log = logger.warning if error.http_status < 500 else logger.error
    log(
        f"{error.code}: {error.message}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())
