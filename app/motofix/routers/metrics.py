from fastapi import APIRouter, Request, Response

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
def get_metrics(request: Request):
    snapshot = request.app.state.metrics.render()
    return Response(content=snapshot.content, media_type=snapshot.content_type)
