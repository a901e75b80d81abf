from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

from app.motofix.core.error_catalog import AppError, ErrorCatalog


_HTTP_STATUS_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _set_error_context(request: Request, code: str, exc: Exception | None = None) -> None:
    request.state.error_code = code
    if exc is not None:
        request.state.error_class = exc.__class__.__name__


def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", "")


def _http_error_code(status_code: int) -> str:
    return _HTTP_STATUS_CODES.get(status_code, "HTTP_ERROR")


def error_response(code: str, message: str, details: object, trace_id: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "code": code,
            "message": message,
            "details": details,
            "trace_id": trace_id,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        _set_error_context(request, exc.error.code, exc)
        return error_response(
            code=exc.error.code,
            message=exc.error.message,
            details=exc.details,
            trace_id=_trace_id(request),
            status_code=exc.error.status_code,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code = _http_error_code(exc.status_code)
        _set_error_context(request, code, exc)
        message = str(exc.detail) if exc.detail is not None else "HTTP error"
        return error_response(
            code=code,
            message=message,
            details=None,
            trace_id=_trace_id(request),
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        _set_error_context(request, ErrorCatalog.INTERNAL_ERROR.code, exc)
        return error_response(
            code=ErrorCatalog.INTERNAL_ERROR.code,
            message=ErrorCatalog.INTERNAL_ERROR.message,
            details={"type": exc.__class__.__name__},
            trace_id=_trace_id(request),
            status_code=ErrorCatalog.INTERNAL_ERROR.status_code,
        )
