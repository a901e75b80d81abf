from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import jwt

from clients.motofix_client_sdk.auth_store import AuthStore, MemoryTokenStorage

from motofix_control.app.navigation import NOT_FOUND, Navigator
from motofix_control.app.session_guard import SessionGuard, validate_token


def _jwt(**claims) -> str:
    return jwt.encode(claims, "test-secret", algorithm="HS256")


def test_index_route_depends_on_session() -> None:
    store = AuthStore(storage=MemoryTokenStorage())
    navigator = Navigator(is_authenticated=store.is_authenticated)

    assert navigator.resolve("/").path == "/login"
    store.set_token("abc")
    assert navigator.resolve("/").path == "/dashboard"


def test_known_and_unknown_routes() -> None:
    navigator = Navigator(is_authenticated=lambda: True)

    assert navigator.navigate("/mechanics-management/").path == "/mechanics-management"
    assert navigator.current == "/mechanics-management"
    assert navigator.resolve("/reports") is NOT_FOUND
    navigator.navigate("/reports")
    assert navigator.current_route is NOT_FOUND
    assert navigator.route_for_option("5").path == "/payments"
    assert navigator.history == ["/mechanics-management", "/reports"]


def test_validate_token_cases() -> None:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert validate_token(None).reason == "missing_token"
    assert validate_token("opaque-token").valid is True
    assert validate_token(_jwt(sub="admin")).valid is True
    assert validate_token(_jwt(exp=int((now + timedelta(hours=1)).timestamp())), now_utc=now).valid is True
    assert validate_token(_jwt(exp=int((now - timedelta(minutes=1)).timestamp())), now_utc=now).reason == "expired_token"
    assert validate_token("not.a.jwt").reason == "corrupt_token"
    assert validate_token(_jwt(exp="tomorrow")).reason == "corrupt_token"


def test_session_guard_clears_expired_token() -> None:
    store = AuthStore(storage=MemoryTokenStorage())
    store.set_token(_jwt(exp=int((datetime.now(tz=timezone.utc) - timedelta(minutes=1)).timestamp())))
    reasons: list[str] = []

    allowed = SessionGuard(store, on_invalid_session=reasons.append).require_session()

    assert allowed is False
    assert reasons == ["expired_token"]
    assert store.get_token() is None


def test_session_guard_allows_valid_session() -> None:
    store = AuthStore(storage=MemoryTokenStorage())
    store.set_token("abc")

    assert SessionGuard(store, on_invalid_session=lambda reason: None).require_session() is True
