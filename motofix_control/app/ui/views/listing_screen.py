from __future__ import annotations

from typing import Any

from clients.motofix_client_sdk.exceptions import ApiError, AuthError

from motofix_control.app.infrastructure.logging.logger import get_logger, log_action
from motofix_control.app.listing_cache import ListingCache
from motofix_control.app.state import ConsoleState
from motofix_control.app.ui.components.error_feedback import report_api_error
from motofix_control.app.ui.components.notifications import NotificationCenter
from motofix_control.app.ui.listing_state import ListingController, ListingSnapshot, ListingStatus
from motofix_control.app.ui.listing_view import ColumnDef, build_rows
from motofix_control.app.ui.pagination import describe_range, goto_page, next_page, prev_page
from motofix_control.app.ui.table_printer import print_table

logger = get_logger("motofix_control.listing")


class ListingScreen:
    """Shared search/filter/paging loop for the table screens."""

    module = "listing"
    route = "/"
    title = "Listing"
    search_label = "Search"
    columns: list[ColumnDef] = []

    def __init__(
        self,
        state: ConsoleState,
        notifications: NotificationCenter,
        cache: ListingCache | None = None,
    ) -> None:
        self.state = state
        self.notifications = notifications
        self.controller: ListingController[Any] = ListingController(module=self.module, fetch=self.fetch_page, cache=cache)
        self.session_lost = False

    def build_query(self) -> Any:
        raise NotImplementedError

    def fetch_page(self, query: Any) -> Any:
        raise NotImplementedError

    def prompt_filters(self) -> None:
        """Screens with selectors override this."""

    def refresh(self, force_refresh: bool = False) -> ListingSnapshot[Any]:
        try:
            snapshot = self.controller.load(self.build_query(), force_refresh=force_refresh)
        except ApiError as error:
            self.session_lost = isinstance(error, AuthError)
            report_api_error(self.notifications, error, f"Could not load {self.title.lower()}")
            log_action(logger, self.module, "list", self.route, error.trace_id, "error")
            return self.controller.snapshot
        log_action(logger, self.module, "list", self.route, None, snapshot.status.value)
        return snapshot

    def render(self) -> None:
        snapshot = self.controller.snapshot
        if snapshot.status == ListingStatus.LOADING:
            print(f"\n{self.title}\nLoading...")
            return
        if snapshot.status == ListingStatus.ERROR:
            message = snapshot.error.message if snapshot.error else "unknown error"
            print(f"\n{self.title}\nCould not load data: {message}")
            return
        print_table(self.title, build_rows(snapshot.rows, self.columns), self.columns)
        if snapshot.page is not None:
            print(
                f"{describe_range(snapshot.page.page, snapshot.page.page_size, snapshot.page.total)} "
                f"| page {snapshot.page.page}/{max(snapshot.page.total_pages, 1)}"
            )

    def set_search(self, term: str) -> None:
        self.state.set_search(self.module, term)

    def extra_commands(self) -> str:
        return ""

    def handle_extra(self, option: str) -> bool:
        """Returns True when the option was consumed and the listing changed."""
        return False

    def run(self) -> None:
        self.session_lost = False
        self.refresh()
        while not self.session_lost:
            self.render()
            self.notifications.render()
            extra = self.extra_commands()
            print(f"Commands: n=next p=prev g=goto s=search f=filter r=refresh{extra} b=back")
            option = input("Select an option: ").strip().lower()
            pagination = self.state.pagination(self.module)
            total_pages = self.controller.snapshot.page.total_pages if self.controller.snapshot.page else None
            if option == "b":
                return
            if option == "n":
                next_page(pagination, total_pages)
            elif option == "p":
                prev_page(pagination)
            elif option == "g":
                raw = input("Page: ").strip()
                if not raw.isdigit():
                    print("Page must be a number.")
                    continue
                goto_page(pagination, int(raw), total_pages)
            elif option == "s":
                self.set_search(input(f"{self.search_label}: "))
            elif option == "f":
                self.prompt_filters()
            elif option == "r":
                self.refresh(force_refresh=True)
                continue
            elif not self.handle_extra(option):
                print("Invalid option.")
                continue
            self.refresh()
        self.notifications.render()
