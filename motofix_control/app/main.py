from __future__ import annotations

import sys

from clients.motofix_client_sdk.auth_client import AuthClient
from clients.motofix_client_sdk.config import load_config
from clients.motofix_client_sdk.mechanics_client import MechanicsClient
from clients.motofix_client_sdk.payments_client import PaymentsClient
from clients.motofix_client_sdk.requests_client import RequestsClient
from clients.motofix_client_sdk.session import ApiSession, build_auth_store
from clients.motofix_client_sdk.stats_client import StatsClient

from motofix_control.app.config import AppConfig
from motofix_control.app.console import ControlCenter
from motofix_control.app.listing_cache import ListingCache
from motofix_control.app.navigation import (
    DASHBOARD_ROUTE,
    MECHANICS_MANAGEMENT_ROUTE,
    MECHANICS_ROUTE,
    PAYMENTS_ROUTE,
    REQUESTS_ROUTE,
    Navigator,
)
from motofix_control.app.state import ConsoleState
from motofix_control.app.ui.components.notifications import NotificationCenter
from motofix_control.app.ui.views.dashboard_view import DashboardView
from motofix_control.app.ui.views.login_view import LoginView
from motofix_control.app.ui.views.mechanics_management_view import MechanicsManagementView
from motofix_control.app.ui.views.mechanics_view import MechanicsView
from motofix_control.app.ui.views.payments_view import PaymentsView
from motofix_control.app.ui.views.requests_view import RequestsView


def _print_runtime_config(api_base_url: str, timeout_seconds: float | None, app_config: AppConfig) -> None:
    print("MOTOFIX Control Center")
    print(f"API: {api_base_url}")
    print(f"Timeout: {timeout_seconds if timeout_seconds is not None else 'none'}")
    print(f"Page size: {app_config.page_size}")


def build_control_center(env_file: str | None = None) -> ControlCenter:
    client_config = load_config(env_file)
    app_config = AppConfig.from_env(env_file or ".env")

    auth_store = build_auth_store(client_config)
    navigator = Navigator(is_authenticated=auth_store.is_authenticated)
    session = ApiSession(config=client_config, auth_store=auth_store, on_auth_redirect=navigator.navigate)

    notifications = NotificationCenter()
    state = ConsoleState(page_size=app_config.page_size)
    cache = ListingCache(ttl_seconds=app_config.listing_ttl_seconds)
    listing_args = dict(
        state=state,
        notifications=notifications,
        cache=cache,
    )

    stats = StatsClient(session=session)
    mechanics = MechanicsClient(session=session)
    screens = {
        DASHBOARD_ROUTE: DashboardView(stats, notifications),
        REQUESTS_ROUTE: RequestsView(RequestsClient(session=session), **listing_args),
        MECHANICS_ROUTE: MechanicsView(mechanics, **listing_args),
        MECHANICS_MANAGEMENT_ROUTE: MechanicsManagementView(mechanics, **listing_args),
        PAYMENTS_ROUTE: PaymentsView(PaymentsClient(session=session), stats, **listing_args),
    }
    _print_runtime_config(client_config.api_base_url, client_config.timeout_seconds, app_config)
    return ControlCenter(
        session=session,
        navigator=navigator,
        notifications=notifications,
        login_view=LoginView(AuthClient(session=session), navigator, notifications),
        screens=screens,
        state=state,
        cache=cache,
    )


def main() -> int:
    try:
        control_center = build_control_center()
    except ValueError as error:
        print(f"[config-error] {error}")
        return 2
    try:
        control_center.run()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
