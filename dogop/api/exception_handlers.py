"""Global exception handlers that map domain exceptions to problem responses."""

import logging
from http import HTTPStatus

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dogop.errors import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    INVALID_REQUEST_BODY,
    STORAGE_ERROR,
    DomainValidationError,
    NotFoundError,
    StorageError,
)
from dogop.schemas.error import PROBLEM_MEDIA_TYPE, Problem

logger = logging.getLogger(__name__)


def problem_response(
    status_code: int, title: str, detail: str | None = None, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Return a standardized problem response; `detail` is omitted when absent."""
    body = Problem(title=title, status=status_code, detail=detail)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        reason = (error.get("ctx") or {}).get("error")
        if reason:
            message = f"{message}: {reason}"
        parts.append(f"{loc}: {message}" if loc else message)
    return "; ".join(parts)


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        INVALID_REQUEST_BODY,
        _describe_validation_errors(exc),
    )


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        INVALID_REQUEST,
        str(exc),
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return problem_response(status.HTTP_404_NOT_FOUND, str(exc))


def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        STORAGE_ERROR,
        str(exc),
    )


def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    title = HTTPStatus(exc.status_code).phrase.lower()
    detail = exc.detail if isinstance(exc.detail, str) and exc.detail.lower() != title else None
    return problem_response(exc.status_code, title, detail, headers=exc.headers)


def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return problem_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app):
    """Register problem-body exception handlers on the FastAPI app."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
