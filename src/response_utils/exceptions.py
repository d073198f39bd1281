"""Structured application errors rendered by the response emitters.

A ResponseError carries everything needed to build the error envelope:
{"success": false, "error": {"code": "...", "message": "...", "details": {...}}}.
Handlers either pass one to ``error_response`` or raise it and let the
registered exception handler do the rendering.
"""

from enum import StrEnum
from typing import Any, Self


class ErrorCode(StrEnum):
    """Machine-readable error codes used in the ``error.code`` field."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_HEADER = "MISSING_HEADER"
    INVALID_UUID = "INVALID_UUID"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"
    INVALID_BODY = "INVALID_BODY"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    UNAUTHORIZED_ERROR = "UNAUTHORIZED_ERROR"


class ResponseError(Exception):
    """Application error with an HTTP status and free-form details.

    Inputs are not validated: any code, message and status are accepted.
    """

    def __init__(self, code: str, message: str, status_code: int) -> None:
        self.code = str(code)
        self.message = message
        self.status_code = status_code
        self.details: dict[str, Any] = {}
        super().__init__(message)

    def with_detail(self, key: str, value: Any) -> Self:
        """Set ``details[key]`` (last write wins) and return self for chaining."""
        self.details[key] = value
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        # Exception pickling replays self.args, which only holds the message
        return (type(self), (self.code, self.message, self.status_code), self.__dict__)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


def new_response_error(code: str, message: str, status_code: int) -> ResponseError:
    return ResponseError(code, message, status_code)


# Common errors


def bad_request(message: str) -> ResponseError:
    return ResponseError(ErrorCode.BAD_REQUEST, message, 400)


def unauthorized(message: str) -> ResponseError:
    return ResponseError(ErrorCode.UNAUTHORIZED, message, 401)


def forbidden(message: str) -> ResponseError:
    return ResponseError(ErrorCode.FORBIDDEN, message, 403)


def not_found(resource: str) -> ResponseError:
    return ResponseError(ErrorCode.NOT_FOUND, f"{resource} not found", 404)


def conflict(message: str) -> ResponseError:
    return ResponseError(ErrorCode.CONFLICT, message, 409)


def validation_error(message: str) -> ResponseError:
    return ResponseError(ErrorCode.VALIDATION_ERROR, message, 400)


def internal_server_error(message: str) -> ResponseError:
    return ResponseError(ErrorCode.INTERNAL_SERVER_ERROR, message, 500)


def database_error(err: BaseException) -> ResponseError:
    """Wrap a driver/ORM exception; its text goes into ``details["error"]``."""
    return ResponseError(
        ErrorCode.DATABASE_ERROR,
        "Database operation failed",
        500,
    ).with_detail("error", str(err))


def invalid_input(field: str, reason: str) -> ResponseError:
    return ResponseError(
        ErrorCode.INVALID_INPUT,
        f"Invalid input for field '{field}': {reason}",
        400,
    )


def missing_header(header: str) -> ResponseError:
    return ResponseError(ErrorCode.MISSING_HEADER, f"Missing required header: {header}", 400)


def invalid_uuid(field: str) -> ResponseError:
    return ResponseError(ErrorCode.INVALID_UUID, f"Invalid UUID format for field '{field}'", 400)


def duplicate_entry(resource: str) -> ResponseError:
    return ResponseError(ErrorCode.DUPLICATE_ENTRY, f"{resource} already exists", 409)


def foreign_key_violation(message: str) -> ResponseError:
    return ResponseError(ErrorCode.FOREIGN_KEY_VIOLATION, message, 400)


def unauthorized_error(message: str) -> ResponseError:
    # Same wire code as unauthorized(); ErrorCode.UNAUTHORIZED_ERROR is not used here.
    return ResponseError(ErrorCode.UNAUTHORIZED, message, 401)


def version_exists_error(version_number: str) -> ResponseError:
    return ResponseError(ErrorCode.CONFLICT, f"Version {version_number} already exists", 409)
