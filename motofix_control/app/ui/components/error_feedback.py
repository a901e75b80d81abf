from __future__ import annotations

from clients.motofix_client_sdk.exceptions import ApiError, AuthError

from motofix_control.app.error_presenter import build_error_payload, print_error_banner
from motofix_control.app.ui.components.notifications import NotificationCenter

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."


def report_api_error(notifications: NotificationCenter, error: ApiError, message: str | None = None) -> dict:
    payload = build_error_payload(error)
    if isinstance(error, AuthError):
        notifications.error(SESSION_EXPIRED_MESSAGE)
        return payload
    notifications.error(message or error.message)
    print_error_banner(payload)
    return payload
