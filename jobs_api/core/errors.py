# jobs-api\jobs_api\core\errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Duplicate value entered for email field, please choose another value"
ROUTE_NOT_FOUND_MESSAGE = "Route does not exist"
INTERNAL_ERROR_MESSAGE = "Something went wrong try again later"


# --- Error Taxonomy ---

class CustomAPIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(CustomAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class FieldValidationError(BadRequestError):
    """One or more fields broke their constraints. Every message is reported."""

    def __init__(self, errors: list[str]):
        super().__init__(",".join(errors))
        self.errors = errors


class DuplicateEmailError(BadRequestError):
    def __init__(self, message: str = DUPLICATE_EMAIL_MESSAGE):
        super().__init__(message)


class UnauthenticatedError(CustomAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(CustomAPIError):
    status_code = status.HTTP_404_NOT_FOUND


# --- Boundary Translator ---

def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": message}, headers=headers)


async def custom_api_error_handler(request: Request, exc: CustomAPIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Shape errors (unparsable JSON, wrong types) are reported like field errors.
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", "Invalid request"))
    return _error_response(status.HTTP_400_BAD_REQUEST, ",".join(messages) or "Invalid request")


def is_duplicate_email(exc: IntegrityError) -> bool:
    """True when the violated constraint is the unique index on users.email."""
    detail = str(exc.orig).lower()
    return "email" in detail and ("unique" in detail or "duplicate" in detail)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # A concurrent registration can slip past the pre-insert email check
    if is_duplicate_email(exc):
        logger.warning(f"Duplicate email on {request.method} {request.url.path}")
        return _error_response(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)
    return await unhandled_error_handler(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, ROUTE_NOT_FOUND_MESSAGE)
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, detail, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Installs the single translator from error kind to status code and {"msg": ...} body."""
    app.add_exception_handler(CustomAPIError, custom_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
