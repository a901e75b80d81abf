from __future__ import annotations

from clients.motofix_client_sdk.exceptions import ConflictError, SessionExpiredError, TransportError

from motofix_control.app.error_presenter import build_error_payload
from motofix_control.app.ui.components.error_feedback import SESSION_EXPIRED_MESSAGE, report_api_error
from motofix_control.app.ui.components.notifications import NotificationCenter, ToastLevel


def test_error_payload_categories() -> None:
    network = build_error_payload(TransportError(code="TRANSPORT_ERROR", message="down", status_code=0))
    conflict = build_error_payload(ConflictError(code="CONFLICT", message="dup", status_code=409, trace_id="t1"))
    internal = build_error_payload(RuntimeError("boom"))

    assert (network["category"], network["action"]) == ("network", "Retry")
    assert conflict["trace_id"] == "t1"
    assert internal["code"] == "INTERNAL_ERROR"


def test_notifications_queue_and_drain(capsys) -> None:
    center = NotificationCenter()
    center.success("Mechanic deleted")
    center.error("Failed to delete mechanic")

    assert [toast.level for toast in center.pending] == [ToastLevel.SUCCESS, ToastLevel.ERROR]
    center.render()

    output = capsys.readouterr().out
    assert "[success] Mechanic deleted" in output
    assert "[error] Failed to delete mechanic" in output
    assert center.pending == []
    assert len(center.history) == 2


def test_report_api_error_uses_session_message_for_auth_errors(capsys) -> None:
    center = NotificationCenter()

    report_api_error(center, SessionExpiredError(code="SESSION_EXPIRED", message="Unauthorized", status_code=401))
    report_api_error(center, ConflictError(code="CONFLICT", message="dup", status_code=409), "Failed to add mechanic")

    assert [toast.message for toast in center.drain()] == [SESSION_EXPIRED_MESSAGE, "Failed to add mechanic"]
    assert "[ERROR] code=CONFLICT" in capsys.readouterr().out
