from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

INDEX_ROUTE = "/"
LOGIN_ROUTE = "/login"
DASHBOARD_ROUTE = "/dashboard"
REQUESTS_ROUTE = "/requests"
MECHANICS_ROUTE = "/mechanics"
MECHANICS_MANAGEMENT_ROUTE = "/mechanics-management"
PAYMENTS_ROUTE = "/payments"
NOT_FOUND_ROUTE = "*"


@dataclass(frozen=True)
class NavRoute:
    path: str
    option: str
    label: str
    protected: bool = True


SIDEBAR_ROUTES: list[NavRoute] = [
    NavRoute(DASHBOARD_ROUTE, "1", "Dashboard"),
    NavRoute(REQUESTS_ROUTE, "2", "Requests"),
    NavRoute(MECHANICS_ROUTE, "3", "Mechanics"),
    NavRoute(MECHANICS_MANAGEMENT_ROUTE, "4", "Manage Mechanics"),
    NavRoute(PAYMENTS_ROUTE, "5", "Payments"),
]

ROUTES: dict[str, NavRoute] = {
    LOGIN_ROUTE: NavRoute(LOGIN_ROUTE, "", "Login", protected=False),
    **{route.path: route for route in SIDEBAR_ROUTES},
}
NOT_FOUND = NavRoute(NOT_FOUND_ROUTE, "", "Not Found", protected=False)


@dataclass
class Navigator:
    """Route table plus the current location; ``/`` resolves by session presence."""

    is_authenticated: Callable[[], bool]
    current: str = INDEX_ROUTE
    history: list[str] = field(default_factory=list)

    def resolve(self, path: str) -> NavRoute:
        normalized = (path or INDEX_ROUTE).strip()
        if normalized != INDEX_ROUTE:
            normalized = normalized.rstrip("/")
        if normalized == INDEX_ROUTE:
            target = DASHBOARD_ROUTE if self.is_authenticated() else LOGIN_ROUTE
            return ROUTES[target]
        return ROUTES.get(normalized, NOT_FOUND)

    def navigate(self, path: str) -> NavRoute:
        route = self.resolve(path)
        self.current = route.path if route is not NOT_FOUND else path
        self.history.append(self.current)
        return route

    def route_for_option(self, option: str) -> NavRoute | None:
        return next((route for route in SIDEBAR_ROUTES if route.option == option), None)

    @property
    def current_route(self) -> NavRoute:
        return self.resolve(self.current)
