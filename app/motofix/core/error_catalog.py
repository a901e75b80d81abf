from dataclasses import dataclass
from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    UPSTREAM_UNAVAILABLE = ErrorDefinition(
        "UPSTREAM_UNAVAILABLE",
        "Upstream admin API unavailable",
        status.HTTP_502_BAD_GATEWAY,
    )
    UPSTREAM_TIMEOUT = ErrorDefinition(
        "UPSTREAM_TIMEOUT",
        "Upstream admin API timed out",
        status.HTTP_504_GATEWAY_TIMEOUT,
    )
    NOT_FOUND = ErrorDefinition("NOT_FOUND", "Resource not found", status.HTTP_404_NOT_FOUND)
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)
