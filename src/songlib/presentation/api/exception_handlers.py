"""Translate exceptions into JSON error responses.

Every error body has the same shape::

    {"detail": "<message for the client>", "code": "<ErrorCode value>"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from songlib.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SONG_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAGE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SONG: status.HTTP_409_CONFLICT,
    # Clients only learn that the lookup failed, not why
    ErrorCode.UPSTREAM_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.UPSTREAM_MALFORMED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_CATEGORY_TO_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ExternalServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def _get_status_for_exception(exc: DomainException) -> int:
    """Status for the error code, else for the exception category, else 400."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for category, status_code in _CATEGORY_TO_STATUS:
        if isinstance(exc, category):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Summarize FastAPI's validation errors as ``field: problem; ...``."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{field}: {error.get('msg', 'invalid')}")
    if not problems:
        return "bad request"
    return "bad request: " + "; ".join(problems)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain, request validation and catch-all handlers."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        # details may hold upstream bodies or SQL errors: logged, never returned
        log = logger.error if status_code >= 500 else logger.warning
        log(
            "%s %s failed: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _error_response(status_code, exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        message = _describe_validation_errors(exc)
        logger.warning(
            "%s %s rejected: %s",
            request.method,
            request.url.path,
            message,
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            message,
            ErrorCode.VALIDATION_ERROR,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
