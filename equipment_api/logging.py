from __future__ import annotations

import logging
from typing import Any

import structlog

from equipment_api.core.config import settings

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,  # request_id middleware emits http_request instead
    "sqlalchemy.engine": logging.WARNING,
}


def _level() -> int:
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def _renderer() -> Any:
    fmt = settings.log_format.lower() if settings.log_format else None
    if fmt is None:
        fmt = "console" if settings.app_env == "dev" else "json"
    if fmt == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging() -> None:
    """Route structlog and stdlib logging through one formatter.

    Every record carries an ISO/UTC timestamp and level plus whatever is bound
    in contextvars, so the request_id set by the middleware reaches service
    logs. Output is JSON lines except in dev, where it is colourised console
    text; LOG_FORMAT overrides either way.
    """
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer()],
        )
    )
    logging.basicConfig(level=_level(), handlers=[handler], force=True)

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
