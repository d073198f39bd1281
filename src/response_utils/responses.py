"""Response emitters.

Each function returns exactly one Starlette response (one status code, at
most one JSON body) for a route or exception handler to return::

    @router.get("/users/{user_id}")
    async def get_user(user_id: int) -> Response:
        user = await find_user(user_id)
        if user is None:
            return error_response(not_found("User"))
        return ok_response(UserOut.model_validate(user))
"""

from typing import Any

from fastapi.responses import JSONResponse, Response as HTTPResponse

from response_utils.config import settings
from response_utils.exceptions import ErrorCode, ResponseError
from response_utils.schemas.pagination import Pagination
from response_utils.schemas.response import ListResponse, Response


def success_response(status_code: int, data: Any = None, message: str = "") -> JSONResponse:
    """Return ``{"success": true, "data": ..., "message": ...}`` with the given status."""
    body = Response(success=True, data=data, message=message or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def ok_response(data: Any = None, message: str = "") -> JSONResponse:
    return success_response(200, data, message)


def created_response(data: Any = None, message: str = "") -> JSONResponse:
    return success_response(201, data, message)


def updated_response(data: Any = None, message: str = "") -> JSONResponse:
    """202 Accepted, used for updates."""
    return success_response(202, data, message)


def no_content_response() -> HTTPResponse:
    """204 with no body and no content type."""
    return HTTPResponse(status_code=204)


def error_response(err: BaseException) -> JSONResponse:
    """Render any exception as the standard error envelope.

    A ResponseError keeps its own code, message, details and status.
    Anything else becomes a 500 INTERNAL_SERVER_ERROR whose details.error
    holds the exception text. Unrecognized exception types are handled here,
    never re-raised. Logging is left to the caller (see handlers.py).
    """
    if isinstance(err, ResponseError):
        error = {
            "code": err.code,
            "message": err.message,
            "details": dict(err.details),
        }
        status_code = err.status_code
    else:
        error = {
            "code": ErrorCode.INTERNAL_SERVER_ERROR.value,
            "message": settings.unexpected_error_message,
            "details": {"error": str(err)},
        }
        status_code = 500

    body = Response(success=False, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def list_response_with_pagination(
    data: Any,
    pagination: Pagination | None = None,
) -> JSONResponse:
    """Return ``{"success": true, "data": [...], "pagination": {...}}``, always 200."""
    body = ListResponse(success=True, data=data, pagination=pagination)
    return JSONResponse(status_code=200, content=body.model_dump(mode="json"))


def calculate_pagination(page: int, page_size: int, total: int) -> Pagination:
    """Build pagination metadata, clamping page to >= 1 and page_size to >= 1.

    A non-positive page_size falls back to ``settings.default_page_size``.
    ``total`` is used as given, so a negative total yields a zero or negative
    ``total_pages``.
    """
    if page < 1:
        page = 1
    if page_size < 1:
        page_size = settings.default_page_size

    # Truncate toward zero, then round up on any remainder
    total_pages = abs(total) // page_size
    if total < 0:
        total_pages = -total_pages
    if total % page_size != 0:
        total_pages += 1

    return Pagination(page=page, page_size=page_size, total=total, total_pages=total_pages)
