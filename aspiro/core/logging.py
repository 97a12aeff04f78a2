"""
structlog setup and the per-request log context.

Every log line emitted while a request is in flight carries request_id,
method and path; once the caller is authenticated it also carries user_id.
"""
import logging
import sys
import time
import uuid
from typing import List

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from aspiro.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"

# Chatty at INFO; their warnings still come through.
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "openai", "google_genai")


def _use_json() -> bool:
    if settings.log_json is not None:
        return settings.log_json
    return settings.environment != "development"


def _shared_processors() -> List:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def setup_logging() -> None:
    """Route structlog and stdlib records through one stdout handler."""
    if _use_json():
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # stdlib records (uvicorn, sqlalchemy) get the same timestamp and level
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *tail,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel("DEBUG" if settings.debug else settings.log_level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to the rest of this request's log lines."""
    structlog.contextvars.bind_contextvars(user_id=user_id)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind a request id (the caller's X-Request-ID, or a fresh UUID) into the
    log context, echo it on the response and log one completion line.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        response = await call_next(request)

        get_logger(__name__).info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
