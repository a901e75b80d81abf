from __future__ import annotations

import json
import logging

# httpx logs every forwarded request at INFO; the gateway already emits one line per request.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format="%(message)s")
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))


def log_json(logger: logging.Logger, payload: dict, level: int = logging.INFO) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
