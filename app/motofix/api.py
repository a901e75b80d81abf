from fastapi import APIRouter

from app.motofix.core.config import Settings
from app.motofix.routers.health import router as health_router
from app.motofix.routers.metrics import router as metrics_router
from app.motofix.routers.proxy import build_proxy_router


def build_api_router(settings: Settings) -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(health_router)
    if settings.METRICS_ENABLED:
        api_router.include_router(metrics_router)
    api_router.include_router(build_proxy_router(settings.proxy_prefixes), tags=["proxy"])
    return api_router
