"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tewahed.domain.error import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Turn a domain error into a JSON error response.

    The first matching class in the error's MRO decides the status code.
    Unknown domain errors are treated as server errors.
    """
    status_code = next(
        (ERROR_STATUS[cls] for cls in type(exc).__mro__ if cls in ERROR_STATUS),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        return await handle_store_error(request, exc)

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def handle_store_error(request: Request, exc: DomainError) -> JSONResponse:
    """Report a server-side failure without leaking its cause."""
    logfire.error(
        "Request failed",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        cause=repr(exc.__cause__) if exc.__cause__ else None,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StoreError, handle_store_error)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
