from __future__ import annotations

from clients.motofix_client_sdk.exceptions import ApiError
from clients.motofix_client_sdk.models import DashboardStats, RevenuePoint
from clients.motofix_client_sdk.stats_client import StatsClient

from motofix_control.app.infrastructure.logging.logger import get_logger, log_action
from motofix_control.app.navigation import DASHBOARD_ROUTE
from motofix_control.app.ui.components.error_feedback import report_api_error
from motofix_control.app.ui.components.notifications import NotificationCenter
from motofix_control.app.ui.components.stat_cards import StatCard, print_stat_cards
from motofix_control.app.ui.formatting import format_percent, format_ugx
from motofix_control.app.ui.listing_view import ColumnDef
from motofix_control.app.ui.table_printer import print_table

logger = get_logger("motofix_control.dashboard")

REVENUE_COLUMNS = [ColumnDef("date", "Date"), ColumnDef("amount", "Revenue")]


def build_overview_cards(stats: DashboardStats) -> list[StatCard]:
    return [
        StatCard("Total Requests", f"{stats.total_requests:,}", "All time"),
        StatCard(
            "Completed Jobs",
            f"{stats.completed_jobs:,}",
            f"{format_percent(stats.completed_jobs, stats.total_requests)} completion",
        ),
        StatCard("Pending Jobs", f"{stats.pending_jobs:,}", "Awaiting action"),
        StatCard("Total Mechanics", f"{stats.total_mechanics:,}", f"{stats.verified_mechanics} verified"),
    ]


def build_financial_cards(stats: DashboardStats) -> list[StatCard]:
    return [
        StatCard("Revenue Collected", format_ugx(stats.revenue_collected)),
        StatCard("Paid to Mechanics", format_ugx(stats.paid_to_mechanics), "Platform payouts"),
        StatCard("Net Profit", format_ugx(stats.profit)),
    ]


def verified_fleet_summary(stats: DashboardStats) -> str:
    share = format_percent(stats.verified_mechanics, stats.total_mechanics)
    return (
        f"{stats.verified_mechanics} Verified Mechanics - "
        f"{share} of your fleet is verified and ready to serve"
    )


def revenue_rows(points: list[RevenuePoint]) -> list[dict[str, str]]:
    return [{"date": point.date, "amount": format_ugx(point.amount, compact=False)} for point in points]


class DashboardView:
    def __init__(self, stats: StatsClient, notifications: NotificationCenter) -> None:
        self.stats = stats
        self.notifications = notifications
        self.last_stats: DashboardStats | None = None
        self.last_revenue: list[RevenuePoint] = []

    def load(self) -> bool:
        try:
            self.last_stats = self.stats.fetch_dashboard_stats()
            self.last_revenue = self.stats.fetch_revenue_chart()
        except ApiError as error:
            report_api_error(self.notifications, error, "Could not load dashboard stats")
            log_action(logger, "dashboard", "load", DASHBOARD_ROUTE, error.trace_id, "error")
            return False
        log_action(logger, "dashboard", "load", DASHBOARD_ROUTE, None, "success")
        return True

    def run(self) -> None:
        print("\nDashboard")
        print("Welcome back! Here's what's happening with MOTOFIX.")
        if not self.load() or self.last_stats is None:
            return
        print_stat_cards("Overview", build_overview_cards(self.last_stats))
        print_stat_cards("Financials", build_financial_cards(self.last_stats))
        print_table("Revenue", revenue_rows(self.last_revenue), REVENUE_COLUMNS)
        print(f"\n{verified_fleet_summary(self.last_stats)}")
