from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://motofix-admin-dashboard.onrender.com"
TOKEN_STORE_BACKENDS = {"file", "memory"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    verify_ssl: bool = True
    token_store: str = "file"
    app_name: str = "motofix-control"


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _read_optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"Invalid {name}: expected > 0, got {value}")
    return value


def _normalize_base_url(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return DEFAULT_BASE_URL
    return normalized.rstrip("/")


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load client config from the environment with optional .env override."""
    load_dotenv(env_file)

    api_base_url = _normalize_base_url(os.getenv("MOTOFIX_API_BASE_URL"))
    if not api_base_url.startswith(("http://", "https://")):
        raise ConfigError(f"Invalid MOTOFIX_API_BASE_URL: expected http(s) URL, got {api_base_url!r}")

    token_store = (os.getenv("MOTOFIX_TOKEN_STORE") or "file").strip().lower()
    if token_store not in TOKEN_STORE_BACKENDS:
        raise ConfigError(
            f"Invalid MOTOFIX_TOKEN_STORE: expected one of {sorted(TOKEN_STORE_BACKENDS)}, got {token_store!r}"
        )

    return ClientConfig(
        api_base_url=api_base_url,
        timeout_seconds=_read_optional_float("MOTOFIX_TIMEOUT_SECONDS"),
        verify_ssl=_coerce_bool(os.getenv("MOTOFIX_VERIFY_SSL"), True),
        token_store=token_store,
    )
