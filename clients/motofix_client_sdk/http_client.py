from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import ResponseFormatError, TransportError
from .tracing import TRACE_HEADER, TraceContext

@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    trace_id: str | None


@dataclass
class HttpClient:
    config: ClientConfig
    trace: TraceContext | None = None
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)
        trace_context = self.trace or TraceContext()
        request_headers[TRACE_HEADER] = trace_context.ensure()

        normalized_method = method.upper()
        url = self._build_url(path)
        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "error", trace_context.trace_id)
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc),
                status_code=0,
                details={"type": type(exc).__name__},
                trace_id=trace_context.trace_id,
            ) from exc

        trace_context.update_from_headers(response.headers)
        if response.ok:
            if not response.content:
                self._record_operation(module, operation, started, "success", trace_context.trace_id)
                return None
            try:
                data = response.json()
            except ValueError as exc:
                self._record_operation(module, operation, started, "error", trace_context.trace_id)
                raise ResponseFormatError(
                    code="RESPONSE_FORMAT_ERROR",
                    message="Response body is not valid JSON",
                    status_code=response.status_code,
                    trace_id=trace_context.trace_id,
                    body=response.text,
                ) from exc
            self._record_operation(module, operation, started, "success", trace_context.trace_id)
            return data

        payload: object = None
        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError):
            payload = None
        self._record_operation(module, operation, started, "error", trace_context.trace_id)
        raise map_error(
            response.status_code,
            response.text or response.reason or "",
            payload if isinstance(payload, dict) else None,
            trace_context.trace_id,
        )

    def _record_operation(self, module: str, operation: str, started: float, result: str, trace_id: str | None) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            trace_id=trace_id,
        )
