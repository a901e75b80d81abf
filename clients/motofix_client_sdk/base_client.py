from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ResponseFormatError
from .session import ApiSession

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_model(model: type[ModelT], payload: Any, *, trace_id: str | None = None) -> ModelT:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ResponseFormatError(
            code="RESPONSE_FORMAT_ERROR",
            message=f"Unexpected response shape for {model.__name__}",
            status_code=200,
            details=exc.errors(include_url=False),
            trace_id=trace_id,
        ) from exc


@dataclass
class BaseClient:
    session: ApiSession
    module: str = "unknown"

    def _request(self, method: str, path: str, operation: str, **kwargs: Any) -> Any:
        return self.session.fetch_with_auth(method, path, module=self.module, operation=operation, **kwargs)

    def _parse(self, model: type[ModelT], payload: Any) -> ModelT:
        return parse_model(model, payload, trace_id=self.session.trace.trace_id)
