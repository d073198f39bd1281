"""Exception handlers that render every failure as the standard error envelope.

Install them once on the application::

    app = FastAPI()
    register_exception_handlers(app)

Route handlers can then ``raise not_found("User")`` instead of returning
``error_response(...)``.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from response_utils.exceptions import ErrorCode, ResponseError, validation_error
from response_utils.logging import get_logger
from response_utils.responses import error_response

logger = get_logger(__name__)

_STATUS_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
}


def error_code_for_status(status_code: int) -> ErrorCode:
    """Map an HTTP status to the closest error code."""
    if status_code in _STATUS_CODES:
        return _STATUS_CODES[status_code]
    if status_code >= 500:
        return ErrorCode.INTERNAL_SERVER_ERROR
    return ErrorCode.BAD_REQUEST


async def response_error_handler(request: Request, exc: ResponseError) -> JSONResponse:
    """Render a raised ResponseError with its own status."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("response_error", code=exc.code, status_code=exc.status_code, path=request.url.path)
    return error_response(exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 VALIDATION_ERROR with FastAPI's per-field errors in details.errors."""
    errors: list[dict[str, Any]] = jsonable_encoder(exc.errors())
    logger.info("request_validation_failed", path=request.url.path, error_count=len(errors))
    err = validation_error("Request validation failed").with_detail("errors", errors)
    return error_response(err)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    err = ResponseError(error_code_for_status(exc.status_code), str(exc.detail), exc.status_code)
    response = error_response(err)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions with traceback and return the 500 envelope."""
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResponseError, response_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
