from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int
    details: object | None = None
    trace_id: str | None = None
    body: str | None = None

    def __str__(self) -> str:
        trace = f" trace_id={self.trace_id}" if self.trace_id else ""
        return f"[{self.status_code}] {self.code}: {self.message}{trace}"


class AuthError(ApiError):
    """Authentication missing, rejected or expired."""


class MissingSessionError(AuthError):
    """No token stored; the call was never sent."""


class SessionExpiredError(AuthError):
    """Backend answered 401 for a stored token."""


class InvalidCredentialsError(AuthError):
    """Login rejected the password (401/422)."""


class LoginFailedError(ApiError):
    """Login failed for a reason other than a wrong password."""


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    pass


class ConflictError(ApiError):
    pass


class ServerError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class ResponseFormatError(ApiError):
    """A 2xx body that is not JSON or does not match the expected shape."""
