from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import StreamingResponse

from app.motofix.core.error_catalog import AppError, ErrorCatalog
from app.motofix.core.logging import log_json
from app.motofix.core.metrics import Metrics

logger = logging.getLogger("motofix.proxy")

HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "proxy-connection",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)
_REQUEST_ONLY_SKIP = frozenset({"host", "content-length"})


def filter_request_headers(headers: list[tuple[bytes, bytes]], upstream_origin: str) -> list[tuple[bytes, bytes]]:
    """Copy caller headers, rewriting Host/Origin to the upstream like changeOrigin."""
    upstream = urlsplit(upstream_origin)
    forwarded: list[tuple[bytes, bytes]] = [(b"host", upstream.netloc.encode("latin-1"))]
    for name, value in headers:
        lowered = name.decode("latin-1").lower()
        if lowered in HOP_BY_HOP_HEADERS or lowered in _REQUEST_ONLY_SKIP:
            continue
        if lowered == "origin":
            value = f"{upstream.scheme}://{upstream.netloc}".encode("latin-1")
        forwarded.append((name, value))
    return forwarded


def filter_response_headers(headers: list[tuple[bytes, bytes]]) -> list[tuple[bytes, bytes]]:
    return [(name, value) for name, value in headers if name.decode("latin-1").lower() not in HOP_BY_HOP_HEADERS]


@dataclass
class UpstreamProxy:
    origin: str
    client: httpx.AsyncClient
    metrics: Metrics

    @classmethod
    def build(
        cls,
        *,
        origin: str,
        metrics: Metrics,
        verify_ssl: bool = True,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "UpstreamProxy":
        client = httpx.AsyncClient(
            transport=transport,
            verify=verify_ssl,
            timeout=httpx.Timeout(timeout_seconds),
            follow_redirects=False,
        )
        return cls(origin=origin.rstrip("/"), client=client, metrics=metrics)

    def target_url(self, request: Request) -> str:
        url = f"{self.origin}{request.url.path}"
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return url

    async def forward(self, request: Request, prefix: str) -> StreamingResponse:
        request.state.upstream = True
        body = await request.body()
        upstream_request = self.client.build_request(
            request.method,
            self.target_url(request),
            headers=filter_request_headers(request.headers.raw, self.origin),
            content=body or None,
        )
        try:
            upstream_response = await self.client.send(upstream_request, stream=True)
        except httpx.TimeoutException as exc:
            self._log_failure(request, "timeout", exc)
            raise AppError(ErrorCatalog.UPSTREAM_TIMEOUT, details={"upstream": self.origin}) from exc
        except httpx.TransportError as exc:
            self._log_failure(request, "unavailable", exc)
            raise AppError(
                ErrorCatalog.UPSTREAM_UNAVAILABLE,
                details={"upstream": self.origin, "type": exc.__class__.__name__},
            ) from exc

        self.metrics.record_upstream_response(prefix=prefix, status_code=upstream_response.status_code)
        response = StreamingResponse(
            upstream_response.aiter_raw(),
            status_code=upstream_response.status_code,
            background=BackgroundTask(upstream_response.aclose),
        )
        response.raw_headers = filter_response_headers(upstream_response.headers.raw)
        return response

    async def aclose(self) -> None:
        await self.client.aclose()

    def _log_failure(self, request: Request, reason: str, exc: Exception) -> None:
        self.metrics.increment_upstream_error(reason)
        log_json(
            logger,
            {
                "event": "upstream_error",
                "trace_id": getattr(request.state, "trace_id", ""),
                "method": request.method,
                "path": request.url.path,
                "upstream": self.origin,
                "reason": reason,
                "error_class": exc.__class__.__name__,
            },
            level=logging.WARNING,
        )
