from __future__ import annotations

import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-ID"
_TRACE_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def resolve_trace_id(candidate: str | None) -> str:
    """Reuse the caller's trace id when it is a sane token, otherwise mint one."""
    if candidate and _TRACE_ID_PATTERN.match(candidate):
        return candidate
    return uuid.uuid4().hex


class TraceIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = resolve_trace_id(request.headers.get(TRACE_HEADER))
        request.state.trace_id = trace_id
        response: Response = await call_next(request)
        # Proxied responses keep the upstream's own trace header.
        if TRACE_HEADER not in response.headers:
            response.headers[TRACE_HEADER] = trace_id
        return response
