from __future__ import annotations

from dataclasses import dataclass

from .base_client import BaseClient
from .models import DashboardStats, PaymentStats, RevenuePoint
from .normalizers import normalize_stats, payment_stats_from_stats, revenue_points_from_stats

STATS_PATH = "/admin/stats"


@dataclass
class StatsClient(BaseClient):
    module: str = "dashboard"

    def fetch_dashboard_stats(self) -> DashboardStats:
        raw = self._request("GET", STATS_PATH, "fetch_dashboard_stats")
        return self._parse(DashboardStats, normalize_stats(raw))

    def fetch_revenue_chart(self) -> list[RevenuePoint]:
        # The backend only exposes a stats snapshot, so the series has one point.
        raw = self._request("GET", STATS_PATH, "fetch_revenue_chart")
        return [self._parse(RevenuePoint, point) for point in revenue_points_from_stats(raw)]

    def fetch_payment_stats(self) -> PaymentStats:
        raw = self._request("GET", STATS_PATH, "fetch_payment_stats")
        return self._parse(PaymentStats, payment_stats_from_stats(raw))
