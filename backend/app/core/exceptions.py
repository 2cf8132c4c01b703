"""
Application error taxonomy and its mapping onto HTTP responses.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that are reported to the client."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server Error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid input"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token, authorization denied"


class InvalidToken(AuthenticationError):
    """Token is malformed, expired or signed with another key."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Token is not valid"


class AuthorizationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class UnsupportedMediaTypeError(AppError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    message = "Only images are allowed"


class PayloadTooLargeError(AppError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    message = "File too large"


def format_error(message: str) -> dict:
    """Format error response body."""
    return {"msg": message}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid input"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=format_error(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Server Error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
