from __future__ import annotations

from dataclasses import dataclass

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


@dataclass
class MetricsSnapshot:
    content: bytes
    content_type: str


class Metrics:
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._registry = None
        self._http_requests_total = None
        self._http_request_duration_ms = None
        self._upstream_requests_total = None
        self._upstream_errors_total = None
        if self.enabled:
            self._initialize_registry()

    def _initialize_registry(self) -> None:
        self._registry = CollectorRegistry()
        self._http_requests_total = Counter(
            "http_requests_total",
            "HTTP requests by route/method/status.",
            ["route", "method", "status"],
            registry=self._registry,
        )
        self._http_request_duration_ms = Histogram(
            "http_request_duration_ms",
            "HTTP request latency in milliseconds.",
            ["route", "method", "status"],
            buckets=(5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000),
            registry=self._registry,
        )
        self._upstream_requests_total = Counter(
            "upstream_requests_total",
            "Requests forwarded to the admin API by prefix/status.",
            ["prefix", "status"],
            registry=self._registry,
        )
        self._upstream_errors_total = Counter(
            "upstream_errors_total",
            "Forwarding failures before an upstream response arrived.",
            ["reason"],
            registry=self._registry,
        )

    def record_http_request(self, *, route: str, method: str, status_code: int, latency_ms: float) -> None:
        if not self.enabled:
            return
        labels = {"route": route, "method": method, "status": str(status_code)}
        self._http_requests_total.labels(**labels).inc()
        self._http_request_duration_ms.labels(**labels).observe(latency_ms)

    def record_upstream_response(self, *, prefix: str, status_code: int) -> None:
        if not self.enabled:
            return
        self._upstream_requests_total.labels(prefix=prefix, status=str(status_code)).inc()

    def increment_upstream_error(self, reason: str) -> None:
        if not self.enabled:
            return
        self._upstream_errors_total.labels(reason=reason).inc()

    def render(self) -> MetricsSnapshot:
        if not self.enabled:
            return MetricsSnapshot(content=b"metrics_disabled\n", content_type="text/plain")
        return MetricsSnapshot(content=generate_latest(self._registry), content_type=CONTENT_TYPE_LATEST)
