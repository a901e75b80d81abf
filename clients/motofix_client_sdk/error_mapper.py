from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    ValidationError,
)

_DEFAULT_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
}


def map_error(
    status_code: int,
    text: str,
    payload: Mapping[str, object] | None,
    trace_id: str | None,
) -> ApiError:
    payload = payload or {}
    code = str(payload.get("code") or _DEFAULT_CODES.get(status_code, "HTTP_ERROR"))
    details = payload.get("details")
    if details is None:
        details = payload.get("detail")
    payload_trace_id = payload.get("trace_id")
    resolved_trace_id = str(payload_trace_id) if payload_trace_id is not None else trace_id
    mapped: type[ApiError]
    if status_code == 401:
        mapped = AuthError
    elif status_code == 403:
        mapped = ForbiddenError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=f"API Error: {text}",
        status_code=status_code,
        details=details,
        trace_id=resolved_trace_id,
        body=text,
    )
