"""Application-level exception handlers.

Routers translate the domain errors they expect into HTTPException; these
handlers catch whatever is left so no domain failure surfaces as a 500.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ranker.domain.error import (
    AlreadyVotedError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (AlreadyVotedError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (400 for unknown subclasses)."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=str(exc.errors())
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map an uncaught domain error to its status code."""
    status_code = status_for(exc)
    logfire.warn(
        "Unhandled domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
