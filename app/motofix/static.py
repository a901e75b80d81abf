from __future__ import annotations

import logging
import os

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from app.motofix.core.error_catalog import AppError, ErrorCatalog
from app.motofix.core.logging import log_json

logger = logging.getLogger("motofix.static")

INDEX_DOCUMENT = "index.html"


class SPAStaticFiles(StaticFiles):
    """Static assets with a fallback to the single-page entry document."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            log_json(
                logger,
                {"event": "static_dir_missing", "directory": str(self.directory)},
                level=logging.WARNING,
            )
            return
        await super().check_config()

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
        try:
            return await super().get_response(INDEX_DOCUMENT, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            raise AppError(ErrorCatalog.NOT_FOUND, details={"path": scope.get("path")}) from exc
