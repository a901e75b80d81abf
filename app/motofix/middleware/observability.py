from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.motofix.core.logging import log_json

logger = logging.getLogger("motofix.request")


def build_request_log_payload(
    *,
    request: Request,
    response: Response | None,
    latency_ms: float,
) -> dict:
    route = None
    scope_route = request.scope.get("route")
    if scope_route is not None:
        route = getattr(scope_route, "path", None)
    route = route or request.url.path
    status_code = getattr(response, "status_code", 500)
    payload = {
        "event": "http_request",
        "trace_id": getattr(request.state, "trace_id", ""),
        "route": route,
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
        "latency_ms": round(latency_ms, 2),
        "upstream": getattr(request.state, "upstream", False),
        "error_code": getattr(request.state, "error_code", None),
        "error_class": getattr(request.state, "error_class", None),
    }
    return payload


class ObservabilityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            payload = build_request_log_payload(
                request=request,
                response=response,
                latency_ms=latency_ms,
            )
            log_json(logger, payload)
            request.app.state.metrics.record_http_request(
                route=payload["route"],
                method=payload["method"],
                status_code=payload["status_code"],
                latency_ms=latency_ms,
            )
