from __future__ import annotations

from clients.motofix_client_sdk.mechanics_client import MechanicsClient
from clients.motofix_client_sdk.models import Mechanic, Page
from clients.motofix_client_sdk.queries import ALL, MechanicsQuery

from motofix_control.app.navigation import MECHANICS_ROUTE
from motofix_control.app.ui.filters import VERIFIED_OPTIONS, prompt_choice
from motofix_control.app.ui.formatting import format_date
from motofix_control.app.ui.listing_view import ColumnDef
from motofix_control.app.ui.views.listing_screen import ListingScreen

MECHANIC_COLUMNS = [
    ColumnDef("id", "ID"),
    ColumnDef("name", "Mechanic"),
    ColumnDef("phone", "Phone"),
    ColumnDef("location", "Location"),
    ColumnDef("rating", "Rating", lambda value: f"{float(value):.1f}"),
    ColumnDef("jobs_completed", "Jobs"),
    ColumnDef("verified", "Verified"),
    ColumnDef("joined_at", "Joined", format_date),
]


class MechanicsView(ListingScreen):
    module = "mechanics"
    route = MECHANICS_ROUTE
    title = "Mechanics"
    search_label = "Search by phone"
    columns = MECHANIC_COLUMNS

    def __init__(self, client: MechanicsClient, *args, **kwargs) -> None:
        self.client = client
        super().__init__(*args, **kwargs)

    def build_query(self) -> MechanicsQuery:
        pagination = self.state.pagination(self.module)
        return MechanicsQuery(
            page=pagination.page,
            page_size=pagination.page_size,
            verified_only=self.state.filters(self.module).get("verified", ALL) == "verified",
            search=self.state.search(self.module),
        )

    def fetch_page(self, query: MechanicsQuery) -> Page[Mechanic]:
        return self.client.list_mechanics(query)

    def prompt_filters(self) -> None:
        current = self.state.filters(self.module).get("verified", ALL)
        self.state.set_filter(self.module, "verified", prompt_choice("Filter", VERIFIED_OPTIONS, current))
