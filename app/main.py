from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from app.motofix.api import build_api_router
from app.motofix.core.config import Settings
from app.motofix.core.errors import setup_exception_handlers
from app.motofix.core.logging import configure_logging, log_json
from app.motofix.core.metrics import Metrics
from app.motofix.middleware.observability import ObservabilityMiddleware
from app.motofix.middleware.trace import TraceIdMiddleware
from app.motofix.services.upstream import UpstreamProxy
from app.motofix.static import SPAStaticFiles

logger = logging.getLogger("motofix.gateway")


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)
    metrics = Metrics(enabled=settings.METRICS_ENABLED)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.upstream = UpstreamProxy.build(
            origin=settings.upstream_origin,
            metrics=metrics,
            verify_ssl=settings.PROXY_VERIFY_SSL,
            timeout_seconds=settings.PROXY_TIMEOUT_SECONDS,
            transport=transport,
        )
        log_json(
            logger,
            {
                "event": "gateway_started",
                "message": f"Control Center serving on port {settings.PORT} with API proxy to {settings.upstream_origin}",
                "port": settings.PORT,
                "upstream": settings.upstream_origin,
                "prefixes": settings.proxy_prefixes,
            },
        )
        try:
            yield
        finally:
            await app.state.upstream.aclose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.metrics = metrics
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    setup_exception_handlers(app)
    app.include_router(build_api_router(settings))
    app.mount("/", SPAStaticFiles(directory=settings.STATIC_DIR, html=True, check_dir=False), name="spa")
    return app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


app = create_app()

if __name__ == "__main__":
    run()
