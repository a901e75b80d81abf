from clients.motofix_client_sdk.auth_client import AuthClient
from clients.motofix_client_sdk.auth_store import AuthStore, FileTokenStorage, MemoryTokenStorage
from clients.motofix_client_sdk.config import ClientConfig, ConfigError, load_config
from clients.motofix_client_sdk.exceptions import ApiError
from clients.motofix_client_sdk.http_client import HttpClient
from clients.motofix_client_sdk.mechanics_client import MechanicsClient
from clients.motofix_client_sdk.payments_client import PaymentsClient
from clients.motofix_client_sdk.queries import MechanicsQuery, PaymentsQuery, RequestsQuery
from clients.motofix_client_sdk.requests_client import RequestsClient
from clients.motofix_client_sdk.session import ApiSession
from clients.motofix_client_sdk.stats_client import StatsClient

__all__ = [
    "ClientConfig",
    "ConfigError",
    "load_config",
    "ApiError",
    "HttpClient",
    "AuthStore",
    "MemoryTokenStorage",
    "FileTokenStorage",
    "ApiSession",
    "AuthClient",
    "StatsClient",
    "RequestsClient",
    "MechanicsClient",
    "PaymentsClient",
    "RequestsQuery",
    "MechanicsQuery",
    "PaymentsQuery",
]
