# teamdesk/errors.py
"""
Domain exceptions raised by the services, and the handlers that turn them into
the flat ``{"message": ...}`` JSON envelope at the HTTP boundary.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400
    default_message = "Invalid data format"


class AuthenticationError(DomainError):
    """Raised when there is no valid session or the credentials are wrong."""

    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(DomainError):
    """Raised when a row is missing or belongs to another user.

    Both cases share this exception so callers can't probe for other
    users' data.
    """

    status_code = 404
    default_message = "Not found"


class UpstreamError(DomainError):
    """Raised when a store or third-party call fails."""

    status_code = 500
    default_message = "Something went wrong"


# -------------------------------------------
# HTTP mapping
# -------------------------------------------
async def domain_error_handler(request: Request, exc: DomainError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse({"message": UpstreamError.default_message}, status_code=exc.status_code)
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse({"message": "Invalid data format", "errors": errors}, status_code=400)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": UpstreamError.default_message}, status_code=500)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
