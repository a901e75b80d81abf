from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    trace_id = getattr(request.state, "trace_id", "")
    return {"status": "ok", "upstream": request.app.state.settings.upstream_origin, "trace_id": trace_id}
