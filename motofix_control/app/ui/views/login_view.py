from __future__ import annotations

from clients.motofix_client_sdk.auth_client import AuthClient
from clients.motofix_client_sdk.exceptions import ApiError, InvalidCredentialsError

from motofix_control.app.infrastructure.logging.logger import get_logger, log_action
from motofix_control.app.navigation import DASHBOARD_ROUTE, LOGIN_ROUTE, Navigator
from motofix_control.app.ui.components.notifications import NotificationCenter
from motofix_control.app.ui.forms import validate_password

WELCOME_MESSAGE = "Welcome back, Boss"
WRONG_PASSWORD_MESSAGE = "Wrong password – access denied"
LOGIN_FAILED_MESSAGE = "Login failed. Please try again later."

logger = get_logger("motofix_control.login")


class LoginView:
    def __init__(self, auth: AuthClient, navigator: Navigator, notifications: NotificationCenter) -> None:
        self.auth = auth
        self.navigator = navigator
        self.notifications = notifications

    def submit(self, password: str | None) -> bool:
        result = validate_password(password)
        if not result.is_valid:
            self.notifications.error(result.field_errors["password"])
            return False

        try:
            self.auth.login(result.values["password"])
        except InvalidCredentialsError as error:
            self.notifications.error(WRONG_PASSWORD_MESSAGE)
            log_action(logger, "login", "submit", LOGIN_ROUTE, error.trace_id, "rejected")
            return False
        except ApiError as error:
            self.notifications.error(LOGIN_FAILED_MESSAGE)
            log_action(logger, "login", "submit", LOGIN_ROUTE, error.trace_id, "error")
            return False

        self.notifications.success(WELCOME_MESSAGE)
        log_action(logger, "login", "submit", LOGIN_ROUTE, None, "success")
        self.navigator.navigate(DASHBOARD_ROUTE)
        return True

    def run(self) -> bool:
        """Prompt until a login succeeds; False means the operator chose to exit."""
        while True:
            print("\nMOTOFIX Control Center")
            print("Admin login")
            print("1. Enter password")
            print("0. Exit")
            option = input("Select an option: ").strip()
            if option == "0":
                return False
            if option != "1":
                print("Invalid option.")
                continue
            password = input("Admin Password: ")
            succeeded = self.submit(password)
            self.notifications.render()
            if succeeded:
                return True
