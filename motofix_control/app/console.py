from __future__ import annotations

from typing import Protocol

from clients.motofix_client_sdk.session import ApiSession

from motofix_control.app.infrastructure.logging.logger import get_logger, log_action
from motofix_control.app.listing_cache import ListingCache
from motofix_control.app.navigation import (
    INDEX_ROUTE,
    LOGIN_ROUTE,
    NOT_FOUND,
    SIDEBAR_ROUTES,
    Navigator,
)
from motofix_control.app.session_guard import SessionGuard
from motofix_control.app.state import ConsoleState
from motofix_control.app.ui.components.error_feedback import SESSION_EXPIRED_MESSAGE
from motofix_control.app.ui.components.notifications import NotificationCenter
from motofix_control.app.ui.views.login_view import LoginView

logger = get_logger("motofix_control.shell")


class Screen(Protocol):
    def run(self) -> None: ...


class ControlCenter:
    """Sidebar shell: guards protected routes and dispatches to the screens."""

    def __init__(
        self,
        session: ApiSession,
        navigator: Navigator,
        notifications: NotificationCenter,
        login_view: LoginView,
        screens: dict[str, Screen],
        state: ConsoleState,
        cache: ListingCache,
    ) -> None:
        self.session = session
        self.navigator = navigator
        self.notifications = notifications
        self.login_view = login_view
        self.screens = screens
        self.state = state
        self.cache = cache
        self.guard = SessionGuard(session.auth_store, on_invalid_session=self._on_invalid_session)

    def _on_invalid_session(self, reason: str) -> None:
        self.notifications.error(SESSION_EXPIRED_MESSAGE)
        log_action(logger, "shell", "session_guard", self.navigator.current, None, reason)
        self.navigator.navigate(LOGIN_ROUTE)

    def open_current(self) -> bool:
        """Render the current route; False when the operator exits from login."""
        route = self.navigator.current_route
        if route.path == LOGIN_ROUTE:
            return self.login_view.run()
        if route is NOT_FOUND:
            print("\n404")
            print("Oops! Page not found")
            log_action(logger, "shell", "not_found", self.navigator.current, None, "not_found")
            return True
        if route.protected and not self.guard.require_session():
            return True
        screen = self.screens.get(route.path)
        if screen is not None:
            screen.run()
        return True

    def logout(self) -> None:
        self.state.clear()
        self.cache.clear()
        self.session.logout()
        if self.navigator.current != LOGIN_ROUTE:
            self.navigator.navigate(LOGIN_ROUTE)
        log_action(logger, "shell", "logout", LOGIN_ROUTE, None, "success")

    def render_sidebar(self) -> None:
        print("\n=== MOTOFIX Control Center ===")
        for route in SIDEBAR_ROUTES:
            marker = "*" if route.path == self.navigator.current else " "
            print(f" {marker}{route.option}. {route.label}")
        print("  l. Logout")
        print("  0. Exit")
        print("  (or type a path such as /payments)")

    def prompt_next(self) -> bool:
        self.render_sidebar()
        option = input("Select an option: ").strip()
        if option == "0":
            return False
        if option.lower() == "l":
            self.logout()
            return True
        if option.startswith("/"):
            self.navigator.navigate(option)
            return True
        route = self.navigator.route_for_option(option)
        if route is None:
            print("Invalid option.")
            return True
        self.navigator.navigate(route.path)
        return True

    def run(self) -> None:
        self.navigator.navigate(INDEX_ROUTE)
        while True:
            self.notifications.render()
            before = self.navigator.current
            if not self.open_current():
                return
            self.notifications.render()
            # Login, logout and expired sessions move the navigator from inside a screen.
            if self.navigator.current != before:
                continue
            if not self.prompt_next():
                return
