"""Translate domain and storage errors into the uniform error payload."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from directory_api.schemas.error import ErrorResponse
from directory_api.utils.exceptions import NotFoundError
from directory_api.utils.logger import get_logger

logger = get_logger(__name__)

UNIQUE_VIOLATION = "A unique constraint violation occurred."
FOREIGN_KEY_VIOLATION = "A foreign key constraint violation occurred."
UNSPECIFIED_VIOLATION = "An unspecified data integrity violation occurred."


def _error_response(status_code: int, message: str, details: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, details=details).model_dump(),
    )


def _request_description(request: Request) -> str:
    return f"uri={request.url.path}"


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """
    Render validation errors as ``"<field>: <message>"`` strings.

    The field is the last element of the error location, i.e. the wire name
    (``firstName``), not the Python attribute name.
    """
    details = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "request"
        details.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return details


def classify_integrity_error(exc: IntegrityError) -> str:
    """
    Best-effort classification of a storage constraint failure.

    Args:
        exc: IntegrityError raised by the database driver

    Returns:
        Human-readable description of the violated constraint type
    """
    message = str(exc.orig if exc.orig is not None else exc).lower()
    if "unique" in message or "duplicate key" in message:
        return UNIQUE_VIOLATION
    if "foreign key" in message:
        return FOREIGN_KEY_VIOLATION
    return UNSPECIFIED_VIOLATION


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers with the FastAPI app."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return _error_response(
            status.HTTP_404_NOT_FOUND, exc.message, [_request_description(request)]
        )

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        details = format_validation_errors(exc)
        logger.info(f"Validation failed for {request.url.path}: {details}")
        return _error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", details)

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Data integrity violation on {request.url.path}: {exc.orig}")
        return _error_response(
            status.HTTP_409_CONFLICT, "Data integrity violation", [classify_integrity_error(exc)]
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected error: {exc}", exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            [_request_description(request)],
        )
