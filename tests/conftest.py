from __future__ import annotations

import pytest

from clients.motofix_client_sdk.auth_store import AuthStore, MemoryTokenStorage
from clients.motofix_client_sdk.config import ClientConfig
from clients.motofix_client_sdk.session import ApiSession
from clients.motofix_client_sdk.tracing import TraceContext

BASE_URL = "https://api.example.com"


class RedirectRecorder:
    def __init__(self) -> None:
        self.routes: list[str] = []

    def __call__(self, route: str) -> None:
        self.routes.append(route)


@pytest.fixture()
def client_config() -> ClientConfig:
    return ClientConfig(api_base_url=BASE_URL, token_store="memory")


@pytest.fixture()
def auth_store() -> AuthStore:
    return AuthStore(storage=MemoryTokenStorage())


@pytest.fixture()
def redirects() -> RedirectRecorder:
    return RedirectRecorder()


@pytest.fixture()
def api_session(client_config: ClientConfig, auth_store: AuthStore, redirects: RedirectRecorder) -> ApiSession:
    return ApiSession(
        config=client_config,
        auth_store=auth_store,
        on_auth_redirect=redirects,
        trace=TraceContext(trace_id="trace-test"),
    )
