# storerating/core/errors.py
"""
Error taxonomy shared by services and routers.

Every error carries an HTTP status, a machine-readable code and a
human-readable message. Handlers registered on the app render them as
{"detail": {"code": ..., "message": ...}}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("uvicorn.error")


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, code: str | None = None):
        self.message = message or self.message
        self.code = code or self.code
        super().__init__(self.message)

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class Unauthenticated(AppError):
    """No session, an invalid session, or a session whose user is gone."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    message = "Authentication required"


class Forbidden(AppError):
    """Authenticated, but the role is not allowed on this operation."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "You do not have access to this resource"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Invalid input"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"


class Internal(AppError):
    pass


def _first_validation_message(exc: RequestValidationError) -> str:
    """
    Build a short message from the first pydantic error,
    e.g. "name: Name must be at least 20 characters".
    """
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    msg = str(first.get("msg", ValidationError.message))
    # pydantic prefixes messages raised from validators with "Value error, "
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return f"{'.'.join(loc)}: {msg}" if loc else msg


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[errors] %s %s -> %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = ValidationError(_first_validation_message(exc))
    return JSONResponse(status_code=err.status_code, content={"detail": err.to_detail()})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[errors] unhandled error on %s %s", request.method, request.url.path)
    err = Internal()
    return JSONResponse(status_code=err.status_code, content={"detail": err.to_detail()})


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
