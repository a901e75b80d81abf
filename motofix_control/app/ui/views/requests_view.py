from __future__ import annotations

from clients.motofix_client_sdk.models import Page, ServiceRequest
from clients.motofix_client_sdk.queries import ALL, RequestsQuery
from clients.motofix_client_sdk.requests_client import RequestsClient

from motofix_control.app.navigation import REQUESTS_ROUTE
from motofix_control.app.ui.filters import REQUEST_STATUS_OPTIONS, prompt_choice
from motofix_control.app.ui.formatting import format_date, humanize_status
from motofix_control.app.ui.listing_view import ColumnDef
from motofix_control.app.ui.views.listing_screen import ListingScreen


class RequestsView(ListingScreen):
    module = "requests"
    route = REQUESTS_ROUTE
    title = "Service Requests"
    search_label = "Search by phone or location"
    columns = [
        ColumnDef("id", "ID"),
        ColumnDef("customer_phone", "Customer"),
        ColumnDef("service_type", "Service"),
        ColumnDef("location", "Location"),
        ColumnDef("status", "Status", lambda value: humanize_status(getattr(value, "value", value))),
        ColumnDef("mechanic_name", "Mechanic"),
        ColumnDef("created_at", "Created", lambda value: format_date(value, with_time=True)),
    ]

    def __init__(self, client: RequestsClient, *args, **kwargs) -> None:
        self.client = client
        super().__init__(*args, **kwargs)

    def build_query(self) -> RequestsQuery:
        pagination = self.state.pagination(self.module)
        return RequestsQuery(
            page=pagination.page,
            page_size=pagination.page_size,
            status=self.state.filters(self.module).get("status", ALL),
            search=self.state.search(self.module),
        )

    def fetch_page(self, query: RequestsQuery) -> Page[ServiceRequest]:
        return self.client.list_requests(query)

    def prompt_filters(self) -> None:
        current = self.state.filters(self.module).get("status", ALL)
        self.state.set_filter(self.module, "status", prompt_choice("Status", REQUEST_STATUS_OPTIONS, current))
