from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from jose import jwt
from jose.exceptions import JWTError

from clients.motofix_client_sdk.auth_store import AuthStore


@dataclass(frozen=True)
class SessionValidation:
    valid: bool
    reason: str | None = None


def _looks_like_jwt(token: str) -> bool:
    return token.count(".") == 2


def validate_token(token: str | None, now_utc: datetime | None = None) -> SessionValidation:
    if not token:
        return SessionValidation(valid=False, reason="missing_token")

    # Opaque tokens carry no claims; presence is all that can be checked.
    if not _looks_like_jwt(token):
        return SessionValidation(valid=True)

    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return SessionValidation(valid=False, reason="corrupt_token")

    exp = claims.get("exp")
    if exp is None:
        return SessionValidation(valid=True)

    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return SessionValidation(valid=False, reason="corrupt_token")

    now = now_utc or datetime.now(tz=timezone.utc)
    if float(exp) <= now.timestamp():
        return SessionValidation(valid=False, reason="expired_token")

    return SessionValidation(valid=True)


class SessionGuard:
    def __init__(self, auth_store: AuthStore, on_invalid_session: Callable[[str], None]) -> None:
        self._auth_store = auth_store
        self._on_invalid_session = on_invalid_session

    def require_session(self, now_utc: datetime | None = None) -> bool:
        validation = validate_token(self._auth_store.get_token(), now_utc=now_utc)
        if validation.valid:
            return True

        self._auth_store.clear()
        self._on_invalid_session(validation.reason or "invalid_session")
        return False
