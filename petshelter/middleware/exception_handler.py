"""Global exception handlers."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException

from petshelter.utils.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BaseAppException,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_MAPPING: tuple[tuple[type[BaseAppException], int], ...] = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)

ERROR_CODE_MAPPING = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
}


def status_for(exc: BaseAppException) -> int:
    for exc_type, status_code in STATUS_MAPPING:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, error_code: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "details": details or {},
    }


class ExceptionHandlers:
    """Centralized exception handlers for the application."""

    @staticmethod
    async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
        """Handle all application exceptions."""
        status_code = status_for(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"Application exception in {request.method} {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.error_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            },
        )

        # Internal failures do not leak driver messages
        message = exc.message if status_code < 500 else "Internal server error"
        details = exc.details if status_code < 500 else {}

        headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
        return JSONResponse(
            status_code=status_code,
            content=error_body(message, exc.error_code or ERROR_CODE_MAPPING[status_code], details),
            headers=headers,
        )

    @staticmethod
    async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle validation exceptions from pydantic and request parsing."""
        logger.warning(
            f"Validation error in {request.method} {request.url.path}: {str(exc)}",
            extra={
                "path": str(request.url.path),
                "method": request.method,
                "exception_type": type(exc).__name__,
            },
        )

        errors = exc.errors() if isinstance(exc, (RequestValidationError, PydanticValidationError)) else str(exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body(
                "Validation failed",
                "VALIDATION_ERROR",
                {"validation_errors": _jsonable_errors(errors)},
            ),
        )

    @staticmethod
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        """Handle database integrity errors."""
        logger.error(
            f"Database integrity error in {request.method} {request.url.path}: {str(exc)}",
            extra={
                "path": str(request.url.path),
                "method": request.method,
            },
        )

        error_message = "Database constraint violation"
        error_code = "INTEGRITY_ERROR"

        text = str(exc).lower()
        if "duplicate key" in text or "unique constraint" in text:
            error_message = "Resource already exists"
            error_code = "DUPLICATE_RESOURCE"
        elif "foreign key" in text:
            error_message = "Referenced resource not found"
            error_code = "FOREIGN_KEY_VIOLATION"
        elif "not null" in text:
            error_message = "Required field is missing"
            error_code = "REQUIRED_FIELD_MISSING"

        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=error_body(error_message, error_code),
        )

    @staticmethod
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Handle FastAPI HTTP exceptions with consistent format."""
        logger.warning(
            f"HTTP exception in {request.method} {request.url.path}: {exc.detail}",
            extra={
                "status_code": exc.status_code,
                "path": str(request.url.path),
                "method": request.method,
            },
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail), ERROR_CODE_MAPPING.get(exc.status_code, "HTTP_ERROR")),
            headers=getattr(exc, "headers", None),
        )

    @staticmethod
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error in {request.method} {request.url.path}: {str(exc)}",
            extra={
                "path": str(request.url.path),
                "method": request.method,
                "exception_type": type(exc).__name__,
            },
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error", "INTERNAL_ERROR"),
        )


def _jsonable_errors(errors: Any) -> Any:
    if not isinstance(errors, list):
        return errors
    return [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in errors
    ]


def register_exception_handlers(app: Any) -> None:
    """Register all exception handlers with the FastAPI app."""
    handlers = ExceptionHandlers()

    app.add_exception_handler(BaseAppException, handlers.app_exception_handler)

    # Database errors
    app.add_exception_handler(IntegrityError, handlers.integrity_error_handler)

    # HTTP exceptions
    app.add_exception_handler(HTTPException, handlers.http_exception_handler)

    # Request and pydantic validation errors
    app.add_exception_handler(RequestValidationError, handlers.validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, handlers.validation_exception_handler)

    # Catch-all for unexpected errors
    app.add_exception_handler(Exception, handlers.general_exception_handler)
