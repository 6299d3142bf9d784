"""
Exception handlers.

Render every failure as {"error": <message>} with a non-2xx status. Client
errors echo their message; internal errors are logged with a traceback and
answered with a generic message.

Dependencies: fastapi, profanity_backend.core.exceptions
System role: Uniform error responses for the HTTP API
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profanity_backend.core.exceptions import ProfanityServiceException
from profanity_backend.models.common import ErrorResponse
from profanity_backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong."


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def handle_service_exception(
    request: Request,
    exc: ProfanityServiceException,
) -> JSONResponse:
    """Map domain exceptions to their status code."""
    if exc.status_code < 500:
        logger.warning(
            f"{__name__}:handle_service_exception - {type(exc).__name__}: {exc.message}",
            extra={"path": request.url.path, "details": exc.details},
        )
        return error_response(exc.message, exc.status_code)

    if exc.status_code == status.HTTP_504_GATEWAY_TIMEOUT:
        logger.error(
            f"{__name__}:handle_service_exception - {exc}",
            extra={"path": request.url.path},
        )
        return error_response(exc.message, exc.status_code)

    log_exception_with_context(
        logger,
        f"{__name__}:handle_service_exception - {type(exc).__name__}",
        exc,
        path=request.url.path,
        details=exc.details,
    )
    return error_response(INTERNAL_ERROR_MESSAGE, exc.status_code)


async def handle_http_exception(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Routing errors (404, 405) raised by the framework itself."""
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(
        f"{__name__}:handle_request_validation_error - {len(exc.errors())} errors",
        extra={"path": request.url.path},
    )
    return error_response("Invalid request.", status.HTTP_422_UNPROCESSABLE_ENTITY)


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    log_exception_with_context(
        logger,
        f"{__name__}:handle_unexpected_exception - {type(exc).__name__}",
        exc,
        path=request.url.path,
    )
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProfanityServiceException, handle_service_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_exception)
