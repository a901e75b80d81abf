from __future__ import annotations

import pytest

from clients.motofix_client_sdk.error_mapper import map_error
from clients.motofix_client_sdk.exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    ValidationError,
)


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (401, AuthError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (400, ValidationError),
        (422, ValidationError),
        (409, ConflictError),
        (500, ServerError),
        (503, ServerError),
        (418, ApiError),
    ],
)
def test_status_codes_map_to_typed_errors(status_code: int, expected: type[ApiError]) -> None:
    error = map_error(status_code, "boom", None, "trace-1")

    assert type(error) is expected
    assert error.status_code == status_code
    assert error.trace_id == "trace-1"


def test_message_carries_body_text() -> None:
    error = map_error(500, "upstream exploded", None, None)

    assert error.message == "API Error: upstream exploded"
    assert error.body == "upstream exploded"
    assert error.code == "HTTP_ERROR"


def test_payload_code_details_and_trace_win() -> None:
    error = map_error(
        422,
        "{}",
        {"code": "BAD_PHONE", "detail": [{"loc": ["body", "phone"], "msg": "invalid"}], "trace_id": "srv"},
        "local",
    )

    assert error.code == "BAD_PHONE"
    assert error.details == [{"loc": ["body", "phone"], "msg": "invalid"}]
    assert error.trace_id == "srv"
