from __future__ import annotations

from dataclasses import dataclass

from .base_client import parse_model
from .exceptions import ApiError, InvalidCredentialsError, LoginFailedError, TransportError
from .models import TokenResponse
from .session import ApiSession

LOGIN_PATH = "/api/login"
_WRONG_PASSWORD_STATUSES = {401, 422}


@dataclass
class AuthClient:
    session: ApiSession

    def login(self, password: str) -> TokenResponse:
        try:
            data = self.session.http.request(
                "POST",
                LOGIN_PATH,
                headers={"Content-Type": "application/json"},
                json_body={"password": password},
                module="auth",
                operation="login",
            )
        except TransportError:
            raise
        except ApiError as error:
            if error.status_code in _WRONG_PASSWORD_STATUSES:
                raise InvalidCredentialsError(
                    code="INVALID_CREDENTIALS",
                    message="Invalid password",
                    status_code=error.status_code,
                    details=error.details,
                    trace_id=error.trace_id,
                    body=error.body,
                ) from error
            raise LoginFailedError(
                code="LOGIN_FAILED",
                message="Login failed",
                status_code=error.status_code,
                details=error.details,
                trace_id=error.trace_id,
                body=error.body,
            ) from error

        trace_id = self.session.trace.trace_id
        token = parse_model(TokenResponse, data if isinstance(data, dict) else {}, trace_id=trace_id)
        if not token.access_token:
            raise LoginFailedError(
                code="LOGIN_FAILED",
                message="Login response carried no access token",
                status_code=200,
                details=data,
                trace_id=trace_id,
            )
        self.session.auth_store.set_token(token.access_token)
        return token

    def logout(self) -> None:
        self.session.logout()
