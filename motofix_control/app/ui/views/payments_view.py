from __future__ import annotations

from clients.motofix_client_sdk.exceptions import ApiError, AuthError
from clients.motofix_client_sdk.models import Page, Payment, PaymentStats
from clients.motofix_client_sdk.payments_client import PaymentsClient
from clients.motofix_client_sdk.queries import ALL, PaymentsQuery
from clients.motofix_client_sdk.stats_client import StatsClient

from motofix_control.app.navigation import PAYMENTS_ROUTE
from motofix_control.app.ui.components.error_feedback import report_api_error
from motofix_control.app.ui.components.stat_cards import StatCard, print_stat_cards
from motofix_control.app.ui.filters import PAYMENT_STATUS_OPTIONS, PAYMENT_TYPE_OPTIONS, prompt_choice
from motofix_control.app.ui.formatting import format_date, format_ugx
from motofix_control.app.ui.listing_view import ColumnDef
from motofix_control.app.ui.views.listing_screen import ListingScreen


def build_payment_cards(stats: PaymentStats) -> list[StatCard]:
    return [
        StatCard("Total Collected", format_ugx(stats.total_collected), "From customers"),
        StatCard("Paid to Mechanics", format_ugx(stats.total_paid), "Payouts"),
        StatCard("Net", format_ugx(stats.net), "Platform share"),
    ]


class PaymentsView(ListingScreen):
    module = "payments"
    route = PAYMENTS_ROUTE
    title = "Payments"
    search_label = "Search by phone or transaction"
    columns = [
        ColumnDef("date", "Date", lambda value: format_date(value, with_time=True)),
        ColumnDef("transaction_id", "Transaction ID"),
        ColumnDef("phone", "Phone"),
        ColumnDef("amount", "Amount", lambda value: format_ugx(value, compact=False)),
        ColumnDef("type", "Type"),
        ColumnDef("status", "Status"),
        ColumnDef("reason", "Reason"),
    ]

    def __init__(self, client: PaymentsClient, stats: StatsClient, *args, **kwargs) -> None:
        self.client = client
        self.stats = stats
        self.last_stats: PaymentStats | None = None
        super().__init__(*args, **kwargs)

    def build_query(self) -> PaymentsQuery:
        pagination = self.state.pagination(self.module)
        filters = self.state.filters(self.module)
        return PaymentsQuery(
            page=pagination.page,
            page_size=pagination.page_size,
            type=filters.get("type", ALL),
            status=filters.get("status", ALL),
            search=self.state.search(self.module),
        )

    def fetch_page(self, query: PaymentsQuery) -> Page[Payment]:
        return self.client.list_payments(query)

    def prompt_filters(self) -> None:
        filters = self.state.filters(self.module)
        self.state.set_filter(self.module, "type", prompt_choice("Type", PAYMENT_TYPE_OPTIONS, filters.get("type", ALL)))
        self.state.set_filter(
            self.module, "status", prompt_choice("Status", PAYMENT_STATUS_OPTIONS, filters.get("status", ALL))
        )

    def load_stats(self) -> PaymentStats | None:
        try:
            self.last_stats = self.stats.fetch_payment_stats()
        except ApiError as error:
            self.session_lost = isinstance(error, AuthError)
            report_api_error(self.notifications, error, "Could not load payment stats")
            return None
        return self.last_stats

    def run(self) -> None:
        stats = self.load_stats()
        if self.session_lost:
            return
        if stats is not None:
            print_stat_cards("Payment Summary", build_payment_cards(stats))
        super().run()
