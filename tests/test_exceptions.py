import pickle

import pytest

from response_utils.exceptions import (
    ErrorCode,
    ResponseError,
    bad_request,
    conflict,
    database_error,
    duplicate_entry,
    forbidden,
    foreign_key_violation,
    internal_server_error,
    invalid_input,
    invalid_uuid,
    missing_header,
    new_response_error,
    not_found,
    unauthorized,
    unauthorized_error,
    validation_error,
    version_exists_error,
)


# ---------------------------------------------------------------------------
# 1. Named factories map to fixed (code, status) pairs
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "err, code, status_code, message",
    [
        (bad_request("bad"), "BAD_REQUEST", 400, "bad"),
        (unauthorized("who are you"), "UNAUTHORIZED", 401, "who are you"),
        (forbidden("nope"), "FORBIDDEN", 403, "nope"),
        (not_found("User"), "NOT_FOUND", 404, "User not found"),
        (conflict("clash"), "CONFLICT", 409, "clash"),
        (validation_error("invalid"), "VALIDATION_ERROR", 400, "invalid"),
        (internal_server_error("boom"), "INTERNAL_SERVER_ERROR", 500, "boom"),
        (
            invalid_input("email", "must contain @"),
            "INVALID_INPUT",
            400,
            "Invalid input for field 'email': must contain @",
        ),
        (
            missing_header("Authorization"),
            "MISSING_HEADER",
            400,
            "Missing required header: Authorization",
        ),
        (invalid_uuid("user_id"), "INVALID_UUID", 400, "Invalid UUID format for field 'user_id'"),
        (duplicate_entry("Project"), "DUPLICATE_ENTRY", 409, "Project already exists"),
        (foreign_key_violation("owner missing"), "FOREIGN_KEY_VIOLATION", 400, "owner missing"),
        (unauthorized_error("token expired"), "UNAUTHORIZED", 401, "token expired"),
        (version_exists_error("1.2.0"), "CONFLICT", 409, "Version 1.2.0 already exists"),
    ],
    ids=[
        "bad_request",
        "unauthorized",
        "forbidden",
        "not_found",
        "conflict",
        "validation_error",
        "internal_server_error",
        "invalid_input",
        "missing_header",
        "invalid_uuid",
        "duplicate_entry",
        "foreign_key_violation",
        "unauthorized_error",
        "version_exists_error",
    ],
)
def test_factory_code_status_and_message(
    err: ResponseError, code: str, status_code: int, message: str
) -> None:
    assert err.code == code
    assert err.status_code == status_code
    assert err.message == message
    assert err.details == {}


def test_database_error_records_cause() -> None:
    err = database_error(ValueError("duplicate key value violates unique constraint"))
    assert err.code == ErrorCode.DATABASE_ERROR
    assert err.status_code == 500
    assert err.message == "Database operation failed"
    assert err.details == {"error": "duplicate key value violates unique constraint"}


# ---------------------------------------------------------------------------
# 2. Generic constructor accepts anything
# ---------------------------------------------------------------------------
def test_new_response_error_has_empty_details() -> None:
    err = new_response_error("TEAPOT", "short and stout", 418)
    assert (err.code, err.message, err.status_code, err.details) == (
        "TEAPOT",
        "short and stout",
        418,
        {},
    )


def test_no_input_validation() -> None:
    err = ResponseError("", "", -1)
    assert err.code == ""
    assert err.status_code == -1


def test_details_are_not_shared_between_instances() -> None:
    first = bad_request("a").with_detail("k", 1)
    second = bad_request("b")
    assert second.details == {}
    assert first.details == {"k": 1}


# ---------------------------------------------------------------------------
# 3. with_detail chaining
# ---------------------------------------------------------------------------
def test_with_detail_returns_same_instance() -> None:
    err = not_found("User")
    assert err.with_detail("id", 7) is err
    assert err.details == {"id": 7}


def test_with_detail_last_write_wins() -> None:
    err = bad_request("x").with_detail("a", 1).with_detail("a", 2)
    assert err.details == {"a": 2}


def test_with_detail_chains_multiple_keys() -> None:
    err = conflict("taken").with_detail("field", "email").with_detail("value", "a@b.c")
    assert err.details == {"field": "email", "value": "a@b.c"}


# ---------------------------------------------------------------------------
# 4. Behaves like an exception
# ---------------------------------------------------------------------------
def test_str_format() -> None:
    assert str(not_found("User")) == "[NOT_FOUND] User not found"


def test_can_be_raised_and_caught() -> None:
    with pytest.raises(ResponseError) as exc_info:
        raise forbidden("admins only")
    assert exc_info.value.status_code == 403
    assert str(exc_info.value) == "[FORBIDDEN] admins only"


def test_code_is_plain_string() -> None:
    err = bad_request("x")
    assert type(err.code) is str
    assert err.code == "BAD_REQUEST"


def test_survives_pickling_with_details() -> None:
    err = duplicate_entry("Project").with_detail("name", "atlas")
    restored = pickle.loads(pickle.dumps(err))
    assert type(restored) is ResponseError
    assert (restored.code, restored.message, restored.status_code) == (
        "DUPLICATE_ENTRY",
        "Project already exists",
        409,
    )
    assert restored.details == {"name": "atlas"}
    assert str(restored) == "[DUPLICATE_ENTRY] Project already exists"
