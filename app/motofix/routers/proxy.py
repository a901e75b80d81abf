from fastapi import APIRouter, Request

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def _proxy_endpoint(prefix: str):
    async def proxy(request: Request):
        return await request.app.state.upstream.forward(request, prefix)

    return proxy


def build_proxy_router(prefixes: list[str]) -> APIRouter:
    router = APIRouter()
    for prefix in prefixes:
        endpoint = _proxy_endpoint(prefix)
        router.add_api_route(prefix, endpoint, methods=PROXY_METHODS, include_in_schema=False)
        router.add_api_route(f"{prefix}/{{path:path}}", endpoint, methods=PROXY_METHODS, include_in_schema=False)
    return router
