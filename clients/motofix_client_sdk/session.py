from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .auth_store import AuthStore, FileTokenStorage, MemoryTokenStorage
from .config import ClientConfig
from .exceptions import AuthError, MissingSessionError, SessionExpiredError
from .http_client import HttpClient
from .tracing import TraceContext

LOGIN_ROUTE = "/login"

AuthRedirect = Callable[[str], None]


def build_auth_store(config: ClientConfig) -> AuthStore:
    if config.token_store == "memory":
        return AuthStore(storage=MemoryTokenStorage())
    return AuthStore(storage=FileTokenStorage(app_name=config.app_name))


@dataclass
class ApiSession:
    """Single choke point for backend calls: token, headers and the 401 policy."""

    config: ClientConfig
    auth_store: AuthStore | None = None
    on_auth_redirect: AuthRedirect | None = None
    http: HttpClient | None = None
    trace: TraceContext | None = None

    def __post_init__(self) -> None:
        self.auth_store = self.auth_store or build_auth_store(self.config)
        self.trace = self.trace or TraceContext()
        self.http = self.http or HttpClient(config=self.config, trace=self.trace)

    def is_authenticated(self) -> bool:
        return self.auth_store.is_authenticated()

    def fetch_with_auth(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> Any:
        token = self.auth_store.get_token()
        if not token:
            self._expire_session()
            raise MissingSessionError(code="MISSING_SESSION", message="No auth token", status_code=401)

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        try:
            return self.http.request(
                method,
                path,
                headers=headers,
                json_body=json_body,
                params=params,
                module=module,
                operation=operation,
            )
        except AuthError as error:
            self._expire_session()
            raise SessionExpiredError(
                code="SESSION_EXPIRED",
                message="Unauthorized",
                status_code=401,
                details=error.details,
                trace_id=error.trace_id,
                body=error.body,
            ) from error

    def logout(self) -> None:
        self._expire_session()

    def _expire_session(self) -> None:
        self.auth_store.clear()
        if self.on_auth_redirect:
            self.on_auth_redirect(LOGIN_ROUTE)
