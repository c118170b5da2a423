"""Exception handlers.

Translate application exceptions into HTTP responses with a single
error body shape (see ``ErrorResponse``).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.dto import ErrorResponse
from users_api.errors import UserApiError, ValidationFailedError
from users_api.validation import ValidationErrors

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    body = ErrorResponse(detail=detail, code=code, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the API's exception handlers on ``app``."""

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        return error_response(exc.status_code, exc.message, exc.code, exc.errors)

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        return error_response(exc.status_code, exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Binding failures (query strings, unreadable JSON) are client errors
        errors = ValidationErrors()
        errors.add_details(exc.errors())
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "The request could not be bound",
            "INVALID_REQUEST",
            errors.as_dict(),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            "UNHANDLED",
        )
