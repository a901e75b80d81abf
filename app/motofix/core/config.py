from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "MOTOFIX Control Center"
    PORT: int = 10000
    HOST: str = "0.0.0.0"
    ADMIN_API_URL: str = "https://motofix-admin-dashboard.onrender.com"
    STATIC_DIR: str = "dist"
    PROXY_PREFIXES: str = "/api,/admin"
    PROXY_VERIFY_SSL: bool = True
    PROXY_TIMEOUT_SECONDS: float | None = None
    METRICS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"

    @property
    def upstream_origin(self) -> str:
        return self.ADMIN_API_URL.rstrip("/")

    @property
    def proxy_prefixes(self) -> list[str]:
        prefixes = []
        for item in self.PROXY_PREFIXES.split(","):
            prefix = item.strip().rstrip("/")
            if not prefix:
                continue
            if not prefix.startswith("/"):
                prefix = f"/{prefix}"
            prefixes.append(prefix)
        return prefixes

